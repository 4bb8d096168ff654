"""Update Location Use Case"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from location_api.application.errors import LocationNotFoundError, ValidationError
from location_api.application.ports.repositories import ILocationRepository

from .common import to_location_id

logger = structlog.get_logger()

# 不変のフィールド（パッチから黙って除外する）
IDENTITY_FIELD = "locationId"


@dataclass
class UpdateLocationInput:
    """更新入力DTO"""

    location_id: str
    patch: dict[str, Any] = field(default_factory=dict)


@dataclass
class UpdateLocationOutput:
    """更新出力DTO"""

    item: dict[str, Any]


def build_patch(payload: dict[str, Any]) -> dict[str, Any]:
    """リクエストボディからフィールド単位のマージパッチを作成"""
    return {key: value for key, value in payload.items() if key != IDENTITY_FIELD}


class UpdateLocationUseCase:
    """
    ロケーション更新 ユースケース

    ボディの各キーをフィールド単位でマージする（置換ではない）。
    locationId は更新対象から除外し、空のパッチは ValidationError とする。
    """

    def __init__(self, location_repository: ILocationRepository):
        self._location_repo = location_repository

    async def execute(self, input_data: UpdateLocationInput) -> UpdateLocationOutput:
        """ユースケースを実行"""
        location_id = to_location_id(input_data.location_id)

        log = logger.bind(location_id=str(location_id))
        log.info("update_location_started", fields=sorted(input_data.patch))

        patch = build_patch(input_data.patch)
        if not patch:
            log.warning("update_location_empty_patch")
            raise ValidationError("The request body contains no attributes to update.")

        await self._location_repo.update(str(location_id), patch)

        item = await self._location_repo.get(str(location_id))
        if item is None:
            log.warning("location_not_found")
            raise LocationNotFoundError(f"Location {location_id} not found")

        log.info("update_location_completed", updated=len(patch))
        return UpdateLocationOutput(item=item)
