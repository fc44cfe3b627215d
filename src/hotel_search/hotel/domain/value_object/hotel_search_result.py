from dataclasses import dataclass
from decimal import Decimal

from hotel_search.hotel.domain.value_object.hotel_id import HotelId


@dataclass(frozen=True)
class HotelSearchResult:
    """検索結果の1件（検索地点からの距離付き）"""

    id: HotelId
    name: str
    price: Decimal
    latitude: float
    longitude: float
    distance_km: float
