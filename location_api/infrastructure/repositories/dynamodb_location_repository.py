"""DynamoDB Location Repository Implementation"""
from __future__ import annotations

from decimal import Decimal, DecimalException
from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from location_api.application.errors import (
    LocationNotFoundError,
    LocationStoreError,
    ValidationError,
)
from location_api.application.ports.repositories import ILocationRepository

logger = structlog.get_logger()

PARTITION_KEY = "locationId"


def to_dynamodb_value(value: Any) -> Any:
    """float を Decimal に変換（DynamoDB の数値型は float を受け付けない）"""
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {key: to_dynamodb_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_dynamodb_value(item) for item in value]
    return value


def build_update_params(patch: dict[str, Any]) -> dict[str, Any]:
    """
    パッチから UpdateItem のパラメータを組み立てる

    任意のフィールド名を安全に扱うため、名前も値も位置プレースホルダで渡す。
    """
    names: dict[str, str] = {"#key": PARTITION_KEY}
    values: dict[str, Any] = {}
    clauses: list[str] = []

    for index, (field_name, value) in enumerate(patch.items()):
        names[f"#f{index}"] = field_name
        values[f":v{index}"] = to_dynamodb_value(value)
        clauses.append(f"#f{index} = :v{index}")

    return {
        "UpdateExpression": "SET " + ", ".join(clauses),
        "ConditionExpression": "attribute_exists(#key)",
        "ExpressionAttributeNames": names,
        "ExpressionAttributeValues": values,
    }


class DynamoDBLocationRepository(ILocationRepository):
    """
    DynamoDB ベースの Location Repository

    パーティションキー locationId の単一テーブルを操作する。
    boto3 リソースはプロセス内で再利用される。
    """

    def __init__(
        self,
        table_name: str,
        region: str = "us-east-1",
    ):
        self.table_name = table_name
        self._dynamodb = boto3.resource("dynamodb", region_name=region)
        self._table = self._dynamodb.Table(table_name)

    async def list_all(self) -> list[dict[str, Any]]:
        """全件取得（ページネーションを辿ってフルスキャン）"""
        log = logger.bind(table=self.table_name)
        log.info("scanning_locations")

        items: list[dict[str, Any]] = []
        scan_kwargs: dict[str, Any] = {}
        try:
            while True:
                response = self._table.scan(**scan_kwargs)
                if "Items" not in response:
                    raise LocationStoreError("No items were found in the DynamoDB Table.")
                items.extend(response["Items"])

                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            log.error("scan_failed", error=str(e))
            raise LocationStoreError(f"Failed to scan locations: {e}") from e

        log.info("locations_scanned", count=len(items))
        return items

    async def get(self, location_id: str) -> dict[str, Any] | None:
        """キーで1件取得"""
        log = logger.bind(location_id=location_id)

        try:
            response = self._table.get_item(Key={PARTITION_KEY: location_id})
        except (ClientError, BotoCoreError) as e:
            log.error("get_item_failed", error=str(e))
            raise LocationStoreError(f"Failed to get location {location_id}: {e}") from e

        item = response.get("Item")
        log.info("get_item_completed", found=item is not None)
        return item

    async def put(self, item: dict[str, Any]) -> None:
        """無条件に書き込み"""
        log = logger.bind(location_id=item.get(PARTITION_KEY))

        try:
            self._table.put_item(Item=to_dynamodb_value(item))
        except (TypeError, DecimalException) as e:
            log.warning("put_item_rejected", error=repr(e))
            raise ValidationError(f"The location contains a value that cannot be stored: {e!r}") from e
        except (ClientError, BotoCoreError) as e:
            log.error("put_item_failed", error=str(e))
            raise LocationStoreError(f"Failed to put location: {e}") from e

        log.info("put_item_completed")

    async def update(self, location_id: str, patch: dict[str, Any]) -> None:
        """
        フィールド単位でマージ更新

        存在確認の条件式を付けるため、存在しないキーに部分的な項目が作られることはない。
        """
        log = logger.bind(location_id=location_id, fields=sorted(patch))

        try:
            self._table.update_item(
                Key={PARTITION_KEY: location_id},
                **build_update_params(patch),
            )
        except (TypeError, DecimalException) as e:
            # NaN・Infinity・範囲外の数値は boto3 のシリアライズで弾かれる
            log.warning("update_item_rejected", error=repr(e))
            raise ValidationError(f"The update contains a value that cannot be stored: {e!r}") from e
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                log.warning("update_target_not_found")
                raise LocationNotFoundError(f"Location {location_id} not found") from e
            log.error("update_item_failed", error=str(e))
            raise LocationStoreError(f"Failed to update location {location_id}: {e}") from e
        except BotoCoreError as e:
            log.error("update_item_failed", error=str(e))
            raise LocationStoreError(f"Failed to update location {location_id}: {e}") from e

        log.info("update_item_completed")

    async def delete(self, location_id: str) -> None:
        """キーで削除"""
        log = logger.bind(location_id=location_id)

        try:
            self._table.delete_item(Key={PARTITION_KEY: location_id})
        except (ClientError, BotoCoreError) as e:
            log.error("delete_item_failed", error=str(e))
            raise LocationStoreError(f"Failed to delete location {location_id}: {e}") from e

        log.info("delete_item_completed")
