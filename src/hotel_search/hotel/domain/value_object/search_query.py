from dataclasses import dataclass, field

from hotel_search.hotel.domain.value_object.geo_location import GeoLocation
from hotel_search.shared.domain.exception import ValidationException

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class SearchQuery:
    """ホテル検索条件（永続化しない）"""

    latitude: float
    longitude: float
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    location: GeoLocation = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValidationException(
                f"Page number must be at least 1, got {self.page_number}"
            )
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValidationException(
                f"Page size must be between 1 and {MAX_PAGE_SIZE}, got {self.page_size}"
            )
        object.__setattr__(
            self, "location", GeoLocation(self.latitude, self.longitude)
        )
