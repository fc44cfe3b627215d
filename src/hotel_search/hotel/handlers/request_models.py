from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hotel_search.hotel.domain.factory import HotelDetails
from hotel_search.hotel.domain.value_object import SearchQuery
from hotel_search.shared.utils import to_decimal


class HotelRequest(BaseModel):
    """ホテル登録・更新の共通リクエストモデル"""

    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="ホテル名",
    )
    price: Decimal = Field(
        ...,
        ge=0,
        description="1泊あたりの料金",
    )
    latitude: float = Field(..., ge=-90, le=90, description="緯度")
    longitude: float = Field(..., ge=-180, le=180, description="経度")

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)

    def to_details(self) -> HotelDetails:
        return {
            "name": self.name,
            "price": self.price,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


class CreateHotelRequest(HotelRequest):
    """ホテル登録リクエストモデル"""


class UpdateHotelRequest(HotelRequest):
    """ホテル更新リクエストモデル"""


class SearchHotelsRequest(BaseModel):
    """ホテル検索リクエストモデル（クエリ文字列から生成）"""

    model_config = ConfigDict(populate_by_name=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    page_number: int = Field(default=1, ge=1, alias="pageNumber")
    page_size: int = Field(default=10, ge=1, le=100, alias="pageSize")

    def to_query(self) -> SearchQuery:
        return SearchQuery(
            latitude=self.latitude,
            longitude=self.longitude,
            page_number=self.page_number,
            page_size=self.page_size,
        )
