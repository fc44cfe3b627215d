import copy
from threading import Event, Lock

from hotel_search.hotel.domain.entity import Hotel
from hotel_search.hotel.domain.repository import HotelRepository, is_same_hotel
from hotel_search.hotel.domain.value_object import HotelId
from hotel_search.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from hotel_search.shared.utils import get_logger, raise_if_cancelled

logger = get_logger()


class InMemoryHotelRepository(HotelRepository):
    """プロセス内の dict を使用した HotelRepository の具象実装

    - 開発・テスト用。プロセス再起動でデータは失われる
    - 1 キーごとの追加・置換・削除はロック内で原子的に行う
    - 保存・取得ともにコピーを扱い、呼び出し側の変更が未保存のまま見えないようにする
    """

    def __init__(self) -> None:
        self._hotels: dict[HotelId, Hotel] = {}
        self._lock = Lock()

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        with self._lock:
            hotel = self._hotels.get(hotel_id)
        return copy.copy(hotel) if hotel is not None else None

    def find_all(self, cancel_event: Event | None = None) -> list[Hotel]:
        raise_if_cancelled(cancel_event, "find_all")
        with self._lock:
            hotels = list(self._hotels.values())
        return [copy.copy(h) for h in hotels]

    def add(self, hotel: Hotel) -> Hotel:
        stored = copy.copy(hotel)
        with self._lock:
            if hotel.id in self._hotels:
                logger.error(
                    "Failed to add hotel, id already exists",
                    extra={"hotel_id": str(hotel.id)},
                )
                raise DuplicateResourceException(f"Hotel already exists: {hotel.id}")
            self._hotels[hotel.id] = stored
        logger.debug("Hotel added to in-memory store", extra={"hotel_id": str(hotel.id)})
        return copy.copy(stored)

    def update(self, hotel: Hotel) -> None:
        stored = copy.copy(hotel)
        with self._lock:
            if hotel.id not in self._hotels:
                raise ResourceNotFoundException(f"Hotel not found: {hotel.id}")
            self._hotels[hotel.id] = stored
        logger.debug(
            "Hotel updated in in-memory store", extra={"hotel_id": str(hotel.id)}
        )

    def delete(self, hotel_id: HotelId) -> None:
        with self._lock:
            self._hotels.pop(hotel_id, None)
        logger.debug(
            "Hotel removed from in-memory store", extra={"hotel_id": str(hotel_id)}
        )

    def exists(self, hotel_id: HotelId) -> bool:
        with self._lock:
            return hotel_id in self._hotels

    def exists_by_name_and_location(
        self,
        name: str,
        latitude: float,
        longitude: float,
        exclude_id: HotelId | None = None,
        cancel_event: Event | None = None,
    ) -> bool:
        raise_if_cancelled(cancel_event, "exists_by_name_and_location")
        with self._lock:
            hotels = list(self._hotels.values())
        return any(
            is_same_hotel(h, name, latitude, longitude, exclude_id) for h in hotels
        )
