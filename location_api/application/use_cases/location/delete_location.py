"""Delete Location Use Case"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from location_api.application.errors import LocationNotFoundError
from location_api.application.ports.repositories import ILocationRepository

from .common import to_location_id

logger = structlog.get_logger()


@dataclass
class DeleteLocationInput:
    """削除入力DTO"""

    location_id: str


@dataclass
class DeleteLocationOutput:
    """削除出力DTO（削除前のスナップショット）"""

    item: dict[str, Any]


class DeleteLocationUseCase:
    """
    ロケーション削除 ユースケース

    ストアの削除は内容を返さないため、削除前に項目を取得しておく。
    """

    def __init__(self, location_repository: ILocationRepository):
        self._location_repo = location_repository

    async def execute(self, input_data: DeleteLocationInput) -> DeleteLocationOutput:
        """ユースケースを実行"""
        location_id = to_location_id(input_data.location_id)

        log = logger.bind(location_id=str(location_id))
        log.info("delete_location_started")

        snapshot = await self._location_repo.get(str(location_id))
        if snapshot is None:
            log.warning("location_not_found")
            raise LocationNotFoundError(f"Location {location_id} not found")

        await self._location_repo.delete(str(location_id))

        log.info("delete_location_completed")
        return DeleteLocationOutput(item=snapshot)
