import os
from functools import lru_cache

from hotel_search.hotel.domain.repository import HotelRepository
from hotel_search.hotel.infrastructure.dynamodb_hotel_repository import (
    DynamoDBHotelRepository,
)
from hotel_search.hotel.infrastructure.in_memory_hotel_repository import (
    InMemoryHotelRepository,
)
from hotel_search.shared.utils import get_logger

logger = get_logger()

_TRUTHY = {"1", "true", "yes", "on"}


def use_database() -> bool:
    """USE_DATABASE 環境変数で DynamoDB 実装を選択する（既定は DynamoDB）

    インメモリ実装はプロセス内でしか共有されないため、テストとローカル実行専用。
    """
    return os.getenv("USE_DATABASE", "true").strip().lower() in _TRUTHY


@lru_cache(maxsize=None)
def get_hotel_repository() -> HotelRepository:
    """プロセス内で1つのレポジトリを返す（起動時に一度だけ選択する）"""
    if use_database():
        logger.info("Using DynamoDB hotel repository")
        return DynamoDBHotelRepository()
    logger.info("Using in-memory hotel repository")
    return InMemoryHotelRepository()
