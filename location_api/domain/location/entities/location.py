"""Location Entity"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from ..value_objects.geocode_candidate import GeocodeCandidate
from ..value_objects.location_id import LocationId

UNKNOWN = "Unknown"
DEFAULT_EXTERNAL_ID = "0"


def _text(value: Any) -> str:
    """空なら "Unknown" を返す"""
    if value is None or value == "":
        return UNKNOWN
    return str(value)


def _external_id(value: Any) -> str:
    """外部システムIDは文字列として保持、空なら "0" """
    if value is None or value == "":
        return DEFAULT_EXTERNAL_ID
    return str(value)


def _number(value: Any) -> int | float:
    """数値に変換、空・非数値・NaN は 0"""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number == 0:
        return 0
    return int(number) if number.is_integer() else number


@dataclass
class Location:
    """
    ロケーション（エンティティ）

    ジオコーダーの候補から作られる唯一のエンティティ。
    各フィールドのデフォルト値は互いに独立して適用される。
    """

    location_id: LocationId
    place_id: str = DEFAULT_EXTERNAL_ID
    license: str = UNKNOWN
    osm_type: str = UNKNOWN
    osm_id: str = DEFAULT_EXTERNAL_ID
    lat: str = UNKNOWN
    lon: str = UNKNOWN
    class_: str = UNKNOWN
    type: str = UNKNOWN
    place_rank: int | float = 0
    importance: int | float = 0
    address_type: str = UNKNOWN
    name: str = UNKNOWN
    display_name: str = UNKNOWN
    bounding_box: list[str] = field(default_factory=list)

    @classmethod
    def from_candidate(
        cls,
        location_id: LocationId,
        candidate: GeocodeCandidate,
    ) -> Location:
        """ジオコーディング候補から Location を生成"""
        return cls(
            location_id=location_id,
            place_id=_external_id(candidate.place_id),
            license=_text(candidate.licence),
            osm_type=_text(candidate.osm_type),
            osm_id=_external_id(candidate.osm_id),
            lat=_text(candidate.lat),
            lon=_text(candidate.lon),
            class_=_text(candidate.class_),
            type=_text(candidate.type),
            place_rank=_number(candidate.place_rank),
            importance=_number(candidate.importance),
            address_type=_text(candidate.addresstype),
            name=_text(candidate.name),
            display_name=_text(candidate.display_name),
            bounding_box=[str(coordinate) for coordinate in candidate.boundingbox],
        )

    def to_item(self) -> dict[str, Any]:
        """ストアに書き込む項目形式に変換"""
        return {
            "locationId": str(self.location_id),
            "placeId": self.place_id,
            "license": self.license,
            "osmType": self.osm_type,
            "osmId": self.osm_id,
            "lat": self.lat,
            "lon": self.lon,
            "class": self.class_,
            "type": self.type,
            "placeRank": self.place_rank,
            "importance": self.importance,
            "addressType": self.address_type,
            "name": self.name,
            "displayName": self.display_name,
            "boundingBox": list(self.bounding_box),
        }
