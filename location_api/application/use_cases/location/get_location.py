"""Get Location Use Case"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from location_api.application.errors import LocationNotFoundError
from location_api.application.ports.repositories import ILocationRepository

from .common import to_location_id

logger = structlog.get_logger()


@dataclass
class GetLocationInput:
    """取得入力DTO"""

    location_id: str


@dataclass
class GetLocationOutput:
    """取得出力DTO"""

    item: dict[str, Any]


class GetLocationUseCase:
    """
    ロケーション取得 ユースケース

    キーで1件取得する。存在しなければ LocationNotFoundError。
    """

    def __init__(self, location_repository: ILocationRepository):
        self._location_repo = location_repository

    async def execute(self, input_data: GetLocationInput) -> GetLocationOutput:
        """ユースケースを実行"""
        location_id = to_location_id(input_data.location_id)

        log = logger.bind(location_id=str(location_id))
        log.info("get_location_started")

        item = await self._location_repo.get(str(location_id))
        if item is None:
            log.warning("location_not_found")
            raise LocationNotFoundError(f"Location {location_id} not found")

        log.info("get_location_completed")
        return GetLocationOutput(item=item)
