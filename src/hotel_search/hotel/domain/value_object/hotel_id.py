from __future__ import annotations

import uuid
from dataclasses import dataclass

from hotel_search.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class HotelId:
    """ホテルID（UUID 文字列）"""

    value: str

    def __post_init__(self) -> None:
        try:
            normalized = str(uuid.UUID(str(self.value)))
        except ValueError as e:
            raise ValidationException(f"Invalid hotel id: {self.value}") from e
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> HotelId:
        """ランダムな新しいIDを生成する"""
        return cls(value=str(uuid.uuid4()))
