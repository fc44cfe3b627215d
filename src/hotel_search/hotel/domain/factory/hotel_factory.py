from decimal import Decimal
from typing import TypedDict

from hotel_search.hotel.domain.entity.hotel import Hotel
from hotel_search.hotel.domain.value_object.geo_location import GeoLocation
from hotel_search.hotel.domain.value_object.hotel_id import HotelId
from hotel_search.hotel.domain.value_object.hotel_name import HotelName


class HotelDetails(TypedDict):
    """ホテル詳細の入力データ（作成・更新共通）"""

    name: str
    price: Decimal
    latitude: float
    longitude: float


class HotelFactory:
    """ホテルエンティティを生成するFactory"""

    def create(self, hotel_details: HotelDetails) -> Hotel:
        """新規ホテルのエンティティを作成する"""
        return Hotel(
            id=HotelId.generate(),
            name=HotelName(hotel_details["name"]),
            price=hotel_details["price"],
            location=self.location_of(hotel_details),
        )

    @staticmethod
    def location_of(hotel_details: HotelDetails) -> GeoLocation:
        return GeoLocation(hotel_details["latitude"], hotel_details["longitude"])
