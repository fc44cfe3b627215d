from abc import abstractmethod
from threading import Event

from hotel_search.hotel.domain.entity.hotel import Hotel
from hotel_search.hotel.domain.value_object.hotel_id import HotelId
from hotel_search.shared.domain import Repository


class HotelRepository(Repository[Hotel, HotelId]):
    """ホテルレポジトリのインターフェース

    インメモリ実装と DynamoDB 実装は、永続性を除き呼び出し側から同じ振る舞いに見えること。
    """

    @abstractmethod
    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self, cancel_event: Event | None = None) -> list[Hotel]:
        """全件を取得する（順序は保証しない）"""
        raise NotImplementedError

    @abstractmethod
    def add(self, hotel: Hotel) -> Hotel:
        """新規に保存する。同じIDが既にあれば DuplicateResourceException"""
        raise NotImplementedError

    @abstractmethod
    def update(self, hotel: Hotel) -> None:
        """既存のホテルを置き換える。存在しなければ ResourceNotFoundException"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, hotel_id: HotelId) -> None:
        """削除する。存在しなければ何もしない"""
        raise NotImplementedError

    @abstractmethod
    def exists(self, hotel_id: HotelId) -> bool:
        """IDが存在するかどうか"""
        raise NotImplementedError

    @abstractmethod
    def exists_by_name_and_location(
        self,
        name: str,
        latitude: float,
        longitude: float,
        exclude_id: HotelId | None = None,
        cancel_event: Event | None = None,
    ) -> bool:
        """同名（大文字小文字を無視）かつ同位置（許容誤差内）のホテルがあるかどうか

        exclude_id のホテルは一致とみなさない（更新時の自己衝突を避けるため）。
        """
        raise NotImplementedError


def is_same_hotel(
    hotel: Hotel,
    name: str,
    latitude: float,
    longitude: float,
    exclude_id: HotelId | None,
) -> bool:
    """重複判定の条件（各実装で共通）"""
    if exclude_id is not None and hotel.id == exclude_id:
        return False
    return hotel.name.matches(name) and hotel.location.matches(latitude, longitude)
