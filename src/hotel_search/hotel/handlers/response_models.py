from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from hotel_search.hotel.domain.entity import Hotel
from hotel_search.hotel.domain.value_object import HotelSearchResult
from hotel_search.shared.domain import PagedResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HotelData(_CamelModel):
    """ホテルのレスポンスモデル"""

    id: str
    name: str
    price: Decimal
    latitude: float
    longitude: float
    created_at: datetime
    updated_at: datetime | None = None


class HotelSearchResultData(_CamelModel):
    """検索結果1件のレスポンスモデル"""

    id: str
    name: str
    price: Decimal
    latitude: float
    longitude: float
    distance_km: float


class PagedHotelSearchData(_CamelModel):
    """ページング済み検索結果のレスポンスモデル"""

    items: list[HotelSearchResultData]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: HotelData | PagedHotelSearchData


def to_hotel_response(hotel: Hotel) -> dict:
    """Hotel エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=HotelData(
            id=str(hotel.id),
            name=str(hotel.name),
            price=hotel.price,
            latitude=hotel.location.latitude,
            longitude=hotel.location.longitude,
            created_at=hotel.created_at,
            updated_at=hotel.updated_at,
        )
    ).model_dump(mode="json", by_alias=True)


def to_search_response(result: PagedResult[HotelSearchResult]) -> dict:
    """検索結果をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=PagedHotelSearchData(
            items=[
                HotelSearchResultData(
                    id=str(item.id),
                    name=item.name,
                    price=item.price,
                    latitude=item.latitude,
                    longitude=item.longitude,
                    distance_km=item.distance_km,
                )
                for item in result.items
            ],
            page_number=result.page_number,
            page_size=result.page_size,
            total_count=result.total_count,
            total_pages=result.total_pages,
        )
    ).model_dump(mode="json", by_alias=True)
