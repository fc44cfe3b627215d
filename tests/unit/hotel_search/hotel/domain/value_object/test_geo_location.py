import pytest

from hotel_search.hotel.domain.value_object.geo_location import GeoLocation
from hotel_search.shared.domain.exception import (
    NullArgumentException,
    ValidationException,
)

ZAGREB = GeoLocation(45.8150, 15.9819)
SPLIT = GeoLocation(43.5081, 16.4402)


class TestGeoLocation:
    @pytest.mark.parametrize(
        ("latitude", "longitude"),
        [(0.0, 0.0), (90.0, 180.0), (-90.0, -180.0), (45.815, 15.9819)],
    )
    def test_valid_coordinates(self, latitude, longitude):
        location = GeoLocation(latitude, longitude)
        assert location.latitude == latitude
        assert location.longitude == longitude

    @pytest.mark.parametrize("latitude", [-90.0001, 90.0001, 180.0])
    def test_latitude_out_of_range_raises_error(self, latitude):
        with pytest.raises(ValidationException, match="Latitude"):
            GeoLocation(latitude, 0.0)

    @pytest.mark.parametrize("longitude", [-180.0001, 180.0001])
    def test_longitude_out_of_range_raises_error(self, longitude):
        with pytest.raises(ValidationException, match="Longitude"):
            GeoLocation(0.0, longitude)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            GeoLocation(91.0, 0.0)

    def test_distance_zagreb_to_split(self):
        assert 255 <= ZAGREB.distance_to(SPLIT) <= 260

    def test_distance_quarter_of_equator(self):
        distance = GeoLocation(0.0, 0.0).distance_to(GeoLocation(0.0, 90.0))
        assert 10000 <= distance <= 10020

    def test_distance_is_symmetric(self):
        assert ZAGREB.distance_to(SPLIT) == pytest.approx(SPLIT.distance_to(ZAGREB))

    def test_distance_to_same_point_is_zero(self):
        assert ZAGREB.distance_to(GeoLocation(45.8150, 15.9819)) == 0.0

    def test_distance_to_none_raises_error(self):
        with pytest.raises(NullArgumentException, match="other"):
            ZAGREB.distance_to(None)

    def test_equality_within_tolerance(self):
        a = GeoLocation(45.8150000, 15.9819000)
        b = GeoLocation(45.81500009, 15.98190009)
        assert a == b
        assert hash(a) == hash(b)

    def test_inequality_outside_tolerance(self):
        assert GeoLocation(45.815, 15.9819) != GeoLocation(45.81501, 15.9819)

    def test_set_deduplicates_equal_locations(self):
        locations = {GeoLocation(45.8150000, 15.9819000), GeoLocation(45.81500009, 15.98190009)}
        assert len(locations) == 1

    def test_equal_locations_across_rounding_boundary_hash_identically(self):
        # 小数第5位の丸め境界をまたぐが、許容誤差内で等しい
        a = GeoLocation(45.000005, 15.0)
        b = GeoLocation(45.0000049, 15.0)

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_distance_within_tolerance_is_zero(self):
        a = GeoLocation(45.8150000, 15.9819000)
        b = GeoLocation(45.8150009, 15.9819009)

        assert a == b
        assert a.distance_to(b) == 0.0

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            ZAGREB.latitude = 0.0

    def test_str_formats_six_decimals(self):
        assert str(GeoLocation(45.815, 15.9819)) == "(45.815000, 15.981900)"
