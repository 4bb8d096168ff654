"""List Locations Use Case"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from location_api.application.ports.repositories import ILocationRepository

logger = structlog.get_logger()


@dataclass
class ListLocationsOutput:
    """一覧出力DTO"""

    items: list[dict[str, Any]] = field(default_factory=list)


class ListLocationsUseCase:
    """
    ロケーション一覧取得 ユースケース

    テーブル全体をスキャンして全項目を返す。
    """

    def __init__(self, location_repository: ILocationRepository):
        self._location_repo = location_repository

    async def execute(self) -> ListLocationsOutput:
        """ユースケースを実行"""
        logger.info("list_locations_started")

        items = await self._location_repo.list_all()

        logger.info("list_locations_completed", count=len(items))
        return ListLocationsOutput(items=items)
