from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, radians, sin, sqrt

from hotel_search.shared.domain.exception import (
    NullArgumentException,
    ValidationException,
)

EARTH_RADIUS_KM = 6371.0

# 緯度・経度それぞれの同一判定の許容誤差
COORDINATE_TOLERANCE = 1e-6


@dataclass(frozen=True, eq=False)
class GeoLocation:
    """地理座標（緯度・経度）

    Value Object として不変性を保証。
    等価判定は各軸 1e-6 の許容誤差で行う。
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if self.latitude is None:
            raise NullArgumentException("latitude")
        if self.longitude is None:
            raise NullArgumentException("longitude")
        if not -90 <= self.latitude <= 90:
            raise ValidationException(
                f"Latitude must be between -90 and 90 degrees, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValidationException(
                f"Longitude must be between -180 and 180 degrees, got {self.longitude}"
            )

    def distance_to(self, other: GeoLocation | None) -> float:
        """Haversine 公式による大圏距離（km）を計算する

        許容誤差内で同じ位置なら 0 を返す。
        """
        if other is None:
            raise NullArgumentException("other")
        if self == other:
            return 0.0

        lat1 = radians(self.latitude)
        lat2 = radians(other.latitude)
        delta_lat = radians(other.latitude - self.latitude)
        delta_lng = radians(other.longitude - self.longitude)

        a = (
            sin(delta_lat / 2) ** 2
            + cos(lat1) * cos(lat2) * sin(delta_lng / 2) ** 2
        )
        c = 2 * atan2(sqrt(a), sqrt(1 - a))
        return EARTH_RADIUS_KM * c

    def matches(self, latitude: float, longitude: float) -> bool:
        """許容誤差内で同じ座標かどうか"""
        return (
            abs(self.latitude - latitude) < COORDINATE_TOLERANCE
            and abs(self.longitude - longitude) < COORDINATE_TOLERANCE
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoLocation):
            return NotImplemented
        return self.matches(other.latitude, other.longitude)

    def __hash__(self) -> int:
        # 許容誤差内で等しい位置は常に同じハッシュになる
        return hash(GeoLocation)

    def __str__(self) -> str:
        return f"({self.latitude:.6f}, {self.longitude:.6f})"
