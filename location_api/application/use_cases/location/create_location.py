"""Create Location Use Case"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from location_api.application.errors import GeocodingError, LocationStoreError
from location_api.application.ports.gateways import IGeocodingGateway
from location_api.application.ports.repositories import ILocationRepository
from location_api.domain.location import Location, LocationId

logger = structlog.get_logger()


@dataclass
class CreateLocationInput:
    """作成入力DTO"""

    country: str
    state: str
    city: str
    format: str = "json"


@dataclass
class CreateLocationOutput:
    """作成出力DTO"""

    item: dict[str, Any]


class CreateLocationUseCase:
    """
    ロケーション作成 ユースケース

    1. ジオコーダーで候補を検索
    2. 先頭の候補のみを採用
    3. 新しい LocationId を生成
    4. Location に変換してストアに書き込み
    5. 書き込んだ項目を再取得して返す
    """

    def __init__(
        self,
        location_repository: ILocationRepository,
        geocoding_gateway: IGeocodingGateway,
    ):
        self._location_repo = location_repository
        self._geocoder = geocoding_gateway

    async def execute(self, input_data: CreateLocationInput) -> CreateLocationOutput:
        """ユースケースを実行"""
        log = logger.bind(
            country=input_data.country,
            state=input_data.state,
            city=input_data.city,
        )
        log.info("create_location_started")

        # 1. ジオコーディング
        candidates = await self._geocoder.search(
            city=input_data.city,
            state=input_data.state,
            country=input_data.country,
            format=input_data.format,
        )
        if not candidates:
            log.warning("geocode_no_candidates")
            raise GeocodingError("No data was found from downstream in the third-party API.")

        # 2-4. 先頭の候補から Location を作成して保存
        location = Location.from_candidate(LocationId.generate(), candidates[0])
        location_id = str(location.location_id)
        log = log.bind(location_id=location_id)

        await self._location_repo.put(location.to_item())
        log.info("location_stored", candidate_count=len(candidates))

        # 5. 再取得
        item = await self._location_repo.get(location_id)
        if item is None:
            log.error("location_missing_after_put")
            raise LocationStoreError(f"Location {location_id} was not readable after write")

        log.info("create_location_completed")
        return CreateLocationOutput(item=item)
