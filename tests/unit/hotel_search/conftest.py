from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hotel_search.hotel.domain.entity.hotel import Hotel
from hotel_search.hotel.domain.value_object.geo_location import GeoLocation
from hotel_search.hotel.domain.value_object.hotel_id import HotelId
from hotel_search.hotel.domain.value_object.hotel_name import HotelName


@pytest.fixture
def create_hotel():
    """Hotel を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        name: str = "Grand Hotel",
        price: Decimal = Decimal("150"),
        latitude: float = 45.8150,
        longitude: float = 15.9819,
        hotel_id: str | None = None,
        created_at: datetime | None = None,
    ) -> Hotel:
        return Hotel(
            id=HotelId(value=hotel_id) if hotel_id else HotelId.generate(),
            name=HotelName(value=name),
            price=price,
            location=GeoLocation(latitude, longitude),
            created_at=created_at or datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    return _factory


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ（重複なしを既定とする）"""
    repository = MagicMock()
    repository.exists_by_name_and_location.return_value = False
    return repository
