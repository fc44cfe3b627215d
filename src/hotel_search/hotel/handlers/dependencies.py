from functools import lru_cache

from hotel_search.hotel.applications.hotel_service import HotelService
from hotel_search.hotel.infrastructure.repository_provider import (
    get_hotel_repository,
)


@lru_cache(maxsize=None)
def get_hotel_service() -> HotelService:
    """プロセス内の全ハンドラで共有する HotelService を返す"""
    return HotelService(repository=get_hotel_repository())
