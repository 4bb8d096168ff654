"""Dependency Container"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import structlog

from location_api.application.ports.gateways import IGeocodingGateway
from location_api.application.ports.repositories import ILocationRepository
from location_api.infrastructure.config import Settings, get_settings
from location_api.infrastructure.gateways import NominatimGeocodingGateway
from location_api.infrastructure.logging import configure_logging
from location_api.infrastructure.repositories import DynamoDBLocationRepository

logger = structlog.get_logger()


@dataclass
class Dependencies:
    """
    プロセス全体で共有する依存関係

    プロセス開始時に一度だけ構築し、各ユースケースに明示的に渡す。
    リクエストごとに変更されることはない。
    """

    settings: Settings
    location_repository: ILocationRepository
    geocoding_gateway: IGeocodingGateway


def build_dependencies(settings: Settings) -> Dependencies:
    """設定から依存関係を構築（テーブル名未設定なら ConfigurationError）"""
    table_name = settings.require_table_name()

    return Dependencies(
        settings=settings,
        location_repository=DynamoDBLocationRepository(
            table_name=table_name,
            region=settings.aws_region,
        ),
        geocoding_gateway=NominatimGeocodingGateway(
            user_agent=settings.user_agent,
            base_url=settings.geocoder_url,
            timeout=settings.geocoder_timeout_seconds,
        ),
    )


@lru_cache()
def get_dependencies() -> Dependencies:
    """依存関係のシングルトンインスタンスを取得"""
    settings = get_settings()
    configure_logging(settings.log_level)

    dependencies = build_dependencies(settings)
    logger.info(
        "dependencies_initialized",
        app_name=settings.app_name,
        app_stage=settings.app_stage,
        table=settings.location_table_name,
    )
    return dependencies
