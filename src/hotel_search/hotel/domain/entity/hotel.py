from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from hotel_search.hotel.domain.value_object import GeoLocation, HotelId, HotelName
from hotel_search.shared.domain import Entity
from hotel_search.shared.domain.exception import (
    NullArgumentException,
    ValidationException,
)
from hotel_search.shared.utils.validators import to_decimal


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Hotel(Entity[HotelId]):
    """ホテルエンティティ

    - ID と作成日時は生成時に確定し、以後変更しない
    - 可変項目（名前・価格・位置）の変更は update() のみで行う
    """

    def __init__(
        self,
        id: HotelId,
        name: HotelName,
        price: Decimal,
        location: GeoLocation,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        if id is None:
            raise NullArgumentException("id")
        price = _validate(name, price, location)
        super().__init__(id)
        self._name = name
        self._price = price
        self._location = location
        self._created_at = created_at or _utc_now()
        self._updated_at = updated_at

    @property
    def name(self) -> HotelName:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def location(self) -> GeoLocation:
        return self._location

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime | None:
        return self._updated_at

    def update(self, name: HotelName, price: Decimal, location: GeoLocation) -> None:
        """ホテル情報を更新する

        値が変わらなくても updated_at は必ず現在時刻に更新する。
        """
        price = _validate(name, price, location)
        # 時計が戻っても更新日時が過去に遡らないようにする
        previous = self._updated_at or self._created_at
        self._name, self._price, self._location, self._updated_at = (
            name,
            price,
            location,
            max(_utc_now(), previous),
        )

    def __repr__(self) -> str:
        return (
            f"Hotel(id={self.id}, name={self._name.value!r}, "
            f"price={self._price}, location={self._location})"
        )


def _validate(name: HotelName, price: Decimal, location: GeoLocation) -> Decimal:
    """検証を行い、価格を Decimal にそろえて返す"""
    if name is None:
        raise NullArgumentException("name")
    if price is None:
        raise NullArgumentException("price")
    if location is None:
        raise NullArgumentException("location")
    try:
        price = to_decimal(price)
    except ValueError as e:
        raise ValidationException(f"Invalid hotel price: {price!r}") from e
    if not price.is_finite():
        raise ValidationException(f"Invalid hotel price: {price}")
    if price < 0:
        raise ValidationException(f"Hotel price cannot be negative, got {price}")
    return price
