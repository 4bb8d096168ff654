"""Shared test fixtures"""
from __future__ import annotations

import copy
import json
from typing import Any

import pytest

from location_api.application.errors import LocationNotFoundError
from location_api.application.ports import IGeocodingGateway, ILocationRepository
from location_api.domain.location import GeocodeCandidate
from location_api.infrastructure.config import Settings
from location_api.presentation.dependencies import Dependencies


class InMemoryLocationRepository(ILocationRepository):
    """テスト用のインメモリ Repository（DynamoDB と同じくマージ更新）"""

    def __init__(self) -> None:
        self.items: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []

    async def list_all(self) -> list[dict[str, Any]]:
        self.calls.append("list_all")
        return [copy.deepcopy(item) for item in self.items.values()]

    async def get(self, location_id: str) -> dict[str, Any] | None:
        self.calls.append("get")
        item = self.items.get(location_id)
        return copy.deepcopy(item) if item is not None else None

    async def put(self, item: dict[str, Any]) -> None:
        self.calls.append("put")
        self.items[item["locationId"]] = copy.deepcopy(item)

    async def update(self, location_id: str, patch: dict[str, Any]) -> None:
        self.calls.append("update")
        if location_id not in self.items:
            raise LocationNotFoundError(f"Location {location_id} not found")
        self.items[location_id].update(copy.deepcopy(patch))

    async def delete(self, location_id: str) -> None:
        self.calls.append("delete")
        self.items.pop(location_id, None)


class FakeGeocodingGateway(IGeocodingGateway):
    """テスト用のジオコーダー（呼び出しを記録）"""

    def __init__(self, candidates: list[dict[str, Any]] | None = None) -> None:
        self.candidates = candidates if candidates is not None else [LOS_ANGELES]
        self.calls: list[dict[str, str]] = []

    async def search(
        self,
        city: str,
        state: str,
        country: str,
        format: str = "json",
    ) -> list[GeocodeCandidate]:
        self.calls.append(
            {"city": city, "state": state, "country": country, "format": format}
        )
        return [GeocodeCandidate.from_dict(c) for c in self.candidates]


LOS_ANGELES: dict[str, Any] = {
    "place_id": 12345,
    "osm_type": "relation",
    "osm_id": 207359,
    "lat": "34.05",
    "lon": "-118.24",
    "class": "boundary",
    "type": "administrative",
    "place_rank": 16,
    "importance": 0.8,
    "addresstype": "city",
    "name": "Los Angeles",
    "display_name": "Los Angeles, Los Angeles County, California, United States",
    "boundingbox": ["33.7037", "34.3373", "-118.6682", "-118.1553"],
}


@pytest.fixture
def repository() -> InMemoryLocationRepository:
    return InMemoryLocationRepository()


@pytest.fixture
def geocoder() -> FakeGeocodingGateway:
    return FakeGeocodingGateway()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_name="location-api",
        app_version="1.0.0",
        app_stage="test",
        location_table_name="location-table-test",
    )


@pytest.fixture
def dependencies(
    settings: Settings,
    repository: InMemoryLocationRepository,
    geocoder: FakeGeocodingGateway,
) -> Dependencies:
    return Dependencies(
        settings=settings,
        location_repository=repository,
        geocoding_gateway=geocoder,
    )


def api_event(
    location_id: str | None = None,
    body: Any = None,
    http_method: str = "GET",
) -> dict[str, Any]:
    """API Gateway プロキシイベントを作成"""
    return {
        "httpMethod": http_method,
        "path": f"/locations/{location_id}" if location_id else "/locations",
        "pathParameters": {"locationId": location_id} if location_id is not None else None,
        "body": body if body is None or isinstance(body, str) else json.dumps(body),
        "isBase64Encoded": False,
    }
