import os
from datetime import datetime
from decimal import Decimal
from threading import Event

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from hotel_search.hotel.domain.entity import Hotel
from hotel_search.hotel.domain.repository import HotelRepository, is_same_hotel
from hotel_search.hotel.domain.value_object import GeoLocation, HotelId, HotelName
from hotel_search.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
    StoreException,
)
from hotel_search.shared.utils import get_logger, raise_if_cancelled

logger = get_logger()

ENTITY_TYPE = "HOTEL"
DEFAULT_MAX_ATTEMPTS = 3


def _retry_config(max_attempts: int) -> Config:
    """一時的な失敗は botocore 側で再試行する（回数・待機時間とも上限あり）"""
    return Config(retries={"max_attempts": max_attempts, "mode": "standard"})


class DynamoDBHotelRepository(HotelRepository):
    """DynamoDBを使用したHotelRepository の具象実装

    アイテム構造: PK=HOTEL#<id>, SK=HOTEL
    """

    def __init__(
        self, table_name: str | None = None, max_attempts: int | None = None
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if max_attempts is None:
            max_attempts = int(os.getenv("DYNAMODB_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS))
        self.dynamodb = boto3.resource("dynamodb", config=_retry_config(max_attempts))
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """IDで検索"""
        try:
            response = self.table.get_item(Key=_key(hotel_id), ConsistentRead=True)
        except (ClientError, BotoCoreError) as e:
            raise _store_error("find_by_id", e) from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self, cancel_event: Event | None = None) -> list[Hotel]:
        """全件をスキャンする（ページごとにキャンセルを確認）"""
        return [
            self._to_entity(item)
            for item in self._scan(Attr("entity_type").eq(ENTITY_TYPE), cancel_event)
        ]

    def add(self, hotel: Hotel) -> Hotel:
        """ホテルを新規保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(hotel),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if _error_code(e) == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Hotel already exists: {hotel.id}"
                ) from e
            raise _store_error("add", e) from e
        except BotoCoreError as e:
            raise _store_error("add", e) from e
        logger.debug("Hotel added to DynamoDB", extra={"hotel_id": str(hotel.id)})
        return hotel

    def update(self, hotel: Hotel) -> None:
        """既存のホテルを置き換える"""
        try:
            self.table.put_item(
                Item=self._to_item(hotel),
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if _error_code(e) == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(f"Hotel not found: {hotel.id}") from e
            raise _store_error("update", e) from e
        except BotoCoreError as e:
            raise _store_error("update", e) from e
        logger.debug("Hotel updated in DynamoDB", extra={"hotel_id": str(hotel.id)})

    def delete(self, hotel_id: HotelId) -> None:
        try:
            self.table.delete_item(Key=_key(hotel_id))
        except (ClientError, BotoCoreError) as e:
            raise _store_error("delete", e) from e
        logger.debug("Hotel deleted from DynamoDB", extra={"hotel_id": str(hotel_id)})

    def exists(self, hotel_id: HotelId) -> bool:
        try:
            response = self.table.get_item(
                Key=_key(hotel_id),
                ProjectionExpression="PK",
                ConsistentRead=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise _store_error("exists", e) from e
        return "Item" in response

    def exists_by_name_and_location(
        self,
        name: str,
        latitude: float,
        longitude: float,
        exclude_id: HotelId | None = None,
        cancel_event: Event | None = None,
    ) -> bool:
        """正規化した名前で絞り込み、座標の許容誤差はアプリ側で判定する"""
        items = self._scan(
            Attr("entity_type").eq(ENTITY_TYPE)
            & Attr("name_normalized").eq(name.casefold()),
            cancel_event,
        )
        return any(
            is_same_hotel(self._to_entity(item), name, latitude, longitude, exclude_id)
            for item in items
        )

    def _scan(self, filter_expression, cancel_event: Event | None) -> list[dict]:
        kwargs: dict = {"FilterExpression": filter_expression}
        items: list[dict] = []
        while True:
            raise_if_cancelled(cancel_event, "scan")
            try:
                response = self.table.scan(**kwargs)
            except (ClientError, BotoCoreError) as e:
                raise _store_error("scan", e) from e
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    def _to_item(self, hotel: Hotel) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        item = {
            **_key(hotel.id),
            "entity_type": ENTITY_TYPE,
            "hotel_id": str(hotel.id),
            "name": str(hotel.name),
            "name_normalized": str(hotel.name).casefold(),
            "price": str(hotel.price),
            # DynamoDB の数値型は float を受け付けないため Decimal に変換する
            "latitude": Decimal(str(hotel.location.latitude)),
            "longitude": Decimal(str(hotel.location.longitude)),
            "created_at": hotel.created_at.isoformat(),
        }
        if hotel.updated_at is not None:
            item["updated_at"] = hotel.updated_at.isoformat()
        return item

    def _to_entity(self, item: dict) -> Hotel:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        updated_at = item.get("updated_at")
        return Hotel(
            id=HotelId(value=item["hotel_id"]),
            name=HotelName(value=item["name"]),
            price=Decimal(item["price"]),
            location=GeoLocation(
                latitude=float(item["latitude"]),
                longitude=float(item["longitude"]),
            ),
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )


def _key(hotel_id: HotelId) -> dict:
    return {"PK": f"HOTEL#{hotel_id}", "SK": ENTITY_TYPE}


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


def _store_error(operation: str, error: Exception) -> StoreException:
    logger.error(
        "DynamoDB operation failed",
        extra={"operation": operation, "error": str(error)},
    )
    return StoreException(f"Hotel store operation failed: {operation}")
