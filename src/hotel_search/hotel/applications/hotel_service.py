from threading import Event

from hotel_search.hotel.domain.entity import Hotel
from hotel_search.hotel.domain.factory import HotelDetails, HotelFactory
from hotel_search.hotel.domain.repository import HotelRepository
from hotel_search.hotel.domain.service import SearchRanker
from hotel_search.hotel.domain.value_object import (
    HotelId,
    HotelName,
    HotelSearchResult,
    SearchQuery,
)
from hotel_search.shared.domain import PagedResult
from hotel_search.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from hotel_search.shared.utils import get_logger, raise_if_cancelled

logger = get_logger()


class HotelService:
    """ホテルの登録・取得・更新・削除と検索のユースケース

    - 名前と位置が重複するホテルは登録・更新させない
    - 各操作は cancel_event がセットされていればリポジトリ呼び出し前に中断する
    """

    def __init__(
        self,
        repository: HotelRepository,
        factory: HotelFactory | None = None,
        ranker: SearchRanker | None = None,
    ) -> None:
        self._repository = repository
        self._factory = factory or HotelFactory()
        self._ranker = ranker or SearchRanker()

    def create(
        self, hotel_details: HotelDetails, cancel_event: Event | None = None
    ) -> Hotel:
        """ホテルを登録する"""
        logger.info("Creating hotel", extra={"hotel_name": hotel_details["name"]})

        hotel = self._factory.create(hotel_details)
        self._ensure_unique(hotel_details, exclude_id=None, cancel_event=cancel_event)

        raise_if_cancelled(cancel_event, "create")
        created = self._repository.add(hotel)

        logger.info("Hotel created", extra={"hotel_id": str(created.id)})
        return created

    def get_by_id(
        self, hotel_id: HotelId, cancel_event: Event | None = None
    ) -> Hotel | None:
        """IDでホテルを取得する（存在しなければ None）"""
        raise_if_cancelled(cancel_event, "get_by_id")
        return self._repository.find_by_id(hotel_id)

    def update(
        self,
        hotel_id: HotelId,
        hotel_details: HotelDetails,
        cancel_event: Event | None = None,
    ) -> Hotel:
        """ホテル情報を更新する"""
        logger.info("Updating hotel", extra={"hotel_id": str(hotel_id)})

        raise_if_cancelled(cancel_event, "update")
        hotel = self._repository.find_by_id(hotel_id)
        if hotel is None:
            raise ResourceNotFoundException(f"Hotel with ID {hotel_id} not found")

        name = HotelName(hotel_details["name"])
        location = self._factory.location_of(hotel_details)
        self._ensure_unique(hotel_details, exclude_id=hotel_id, cancel_event=cancel_event)

        hotel.update(name, hotel_details["price"], location)
        raise_if_cancelled(cancel_event, "update")
        self._repository.update(hotel)

        logger.info("Hotel updated", extra={"hotel_id": str(hotel_id)})
        return hotel

    def delete(self, hotel_id: HotelId, cancel_event: Event | None = None) -> None:
        """ホテルを削除する"""
        logger.info("Deleting hotel", extra={"hotel_id": str(hotel_id)})

        raise_if_cancelled(cancel_event, "delete")
        if not self._repository.exists(hotel_id):
            logger.warning(
                "Hotel not found for deletion", extra={"hotel_id": str(hotel_id)}
            )
            raise ResourceNotFoundException(f"Hotel with ID {hotel_id} not found")

        raise_if_cancelled(cancel_event, "delete")
        self._repository.delete(hotel_id)
        logger.info("Hotel deleted", extra={"hotel_id": str(hotel_id)})

    def search(
        self, query: SearchQuery, cancel_event: Event | None = None
    ) -> PagedResult[HotelSearchResult]:
        """検索地点からの距離と価格でホテルを並べ替えて返す"""
        logger.info(
            "Searching hotels",
            extra={
                "latitude": query.latitude,
                "longitude": query.longitude,
                "page_number": query.page_number,
                "page_size": query.page_size,
            },
        )

        raise_if_cancelled(cancel_event, "search")
        hotels = self._repository.find_all(cancel_event=cancel_event)

        raise_if_cancelled(cancel_event, "search")
        result = self._ranker.rank(
            query.location, hotels, query.page_number, query.page_size
        )

        logger.info(
            "Hotel search completed",
            extra={"total_count": result.total_count, "page_number": result.page_number},
        )
        return result

    def _ensure_unique(
        self,
        hotel_details: HotelDetails,
        exclude_id: HotelId | None,
        cancel_event: Event | None,
    ) -> None:
        raise_if_cancelled(cancel_event, "duplicate check")
        if self._repository.exists_by_name_and_location(
            hotel_details["name"],
            hotel_details["latitude"],
            hotel_details["longitude"],
            exclude_id=exclude_id,
            cancel_event=cancel_event,
        ):
            raise DuplicateResourceException(
                f"Hotel '{hotel_details['name']}' already exists at location "
                f"({hotel_details['latitude']}, {hotel_details['longitude']})"
            )
