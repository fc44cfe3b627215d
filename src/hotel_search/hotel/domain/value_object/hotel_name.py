from dataclasses import dataclass

from hotel_search.shared.domain.exception import (
    NullArgumentException,
    ValidationException,
)


@dataclass(frozen=True)
class HotelName:
    """ホテル名"""

    value: str

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullArgumentException("name")
        if not self.value or len(self.value.strip()) == 0:
            raise ValidationException("Hotel name cannot be empty")

    def __str__(self) -> str:
        return self.value

    def matches(self, other: str) -> bool:
        """大文字・小文字を区別せずに比較する"""
        return self.value.casefold() == other.casefold()
