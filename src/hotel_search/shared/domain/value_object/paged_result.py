from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """ページング済みの結果"""

    items: tuple[T, ...]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int

    @classmethod
    def empty(cls, page_number: int, page_size: int) -> PagedResult[T]:
        """要求されたページ番号・サイズをそのまま返す空の結果"""
        return cls(
            items=(),
            page_number=page_number,
            page_size=page_size,
            total_count=0,
            total_pages=0,
        )
