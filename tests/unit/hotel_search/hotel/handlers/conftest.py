import json
import os
from dataclasses import dataclass

import pytest

# ハンドラのインポートより前にインメモリ実装を選択しておく
os.environ["USE_DATABASE"] = "false"

from hotel_search.hotel.applications.hotel_service import HotelService  # noqa: E402
from hotel_search.hotel.handlers import (  # noqa: E402
    create,
    delete,
    get,
    search,
    update,
)
from hotel_search.hotel.infrastructure.in_memory_hotel_repository import (  # noqa: E402
    InMemoryHotelRepository,
)


@dataclass
class FakeLambdaContext:
    function_name: str = "hotel-search"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:hotel-search"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def service(monkeypatch):
    """全ハンドラで同じインメモリリポジトリを共有するサービス"""
    shared = HotelService(repository=InMemoryHotelRepository())
    for module in (create, get, update, delete, search):
        monkeypatch.setattr(module, "service", shared)
    return shared


@pytest.fixture
def api_event():
    """API Gateway HTTP API (v2) イベントを生成する Factory fixture"""

    def _factory(
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
    ) -> dict:
        event: dict = {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/hotels",
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {"http": {"method": "GET", "path": "/hotels"}},
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = body if isinstance(body, str) else json.dumps(body)
        if path_parameters is not None:
            event["pathParameters"] = path_parameters
        if query is not None:
            event["queryStringParameters"] = query
        return event

    return _factory
