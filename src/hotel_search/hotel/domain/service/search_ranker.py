from dataclasses import dataclass
from decimal import Decimal
from math import ceil
from typing import Iterable

from hotel_search.hotel.domain.entity.hotel import Hotel
from hotel_search.hotel.domain.value_object import GeoLocation, HotelSearchResult
from hotel_search.shared.domain import PagedResult


@dataclass(frozen=True)
class _RankedHotel:
    hotel: Hotel
    distance_km: float


class SearchRanker:
    """距離と価格の合成スコアでホテルを並べ替え、ページングする

    - スコア = 正規化距離 + 正規化価格（等しい重み、小さいほど良い）
    - 正規化は対象集合全体の最大値で行うため、ホテルの増減で順位が変わる
    - I/O もロックも持たない純粋な計算
    """

    def rank(
        self,
        user_location: GeoLocation,
        hotels: Iterable[Hotel],
        page_number: int,
        page_size: int,
    ) -> PagedResult[HotelSearchResult]:
        ranked = [
            _RankedHotel(hotel=h, distance_km=h.location.distance_to(user_location))
            for h in hotels
        ]
        if not ranked:
            return PagedResult.empty(page_number, page_size)

        max_distance = max(r.distance_km for r in ranked)
        max_price = max(r.hotel.price for r in ranked)

        # sorted は安定ソートなので同点は元の順序を保つ
        ordered = sorted(ranked, key=lambda r: _score(r, max_distance, max_price))

        total_count = len(ordered)
        start = (page_number - 1) * page_size
        page = ordered[start : start + page_size]

        return PagedResult(
            items=tuple(_to_result(r) for r in page),
            page_number=page_number,
            page_size=page_size,
            total_count=total_count,
            total_pages=ceil(total_count / page_size),
        )


def _score(ranked: _RankedHotel, max_distance: float, max_price: Decimal) -> float:
    normalized_distance = ranked.distance_km / max_distance if max_distance > 0 else 0.0
    normalized_price = float(ranked.hotel.price / max_price) if max_price > 0 else 0.0
    return normalized_distance + normalized_price


def _to_result(ranked: _RankedHotel) -> HotelSearchResult:
    hotel = ranked.hotel
    return HotelSearchResult(
        id=hotel.id,
        name=str(hotel.name),
        price=hotel.price,
        latitude=hotel.location.latitude,
        longitude=hotel.location.longitude,
        distance_km=round(ranked.distance_km, 2),
    )
