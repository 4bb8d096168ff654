"""Geocode Candidate Value Object"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GeocodeCandidate:
    """
    ジオコーディング候補（値オブジェクト）

    外部ジオコーダーのレスポンス1件をそのままの形で保持する。
    Location への変換は Location.from_candidate で明示的に行う。
    """

    place_id: Any = None
    licence: Any = None
    osm_type: Any = None
    osm_id: Any = None
    lat: Any = None
    lon: Any = None
    class_: Any = None
    type: Any = None
    place_rank: Any = None
    importance: Any = None
    addresstype: Any = None
    name: Any = None
    display_name: Any = None
    boundingbox: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeocodeCandidate:
        """辞書から生成（未知のキーは無視）"""
        boundingbox = data.get("boundingbox")
        return cls(
            place_id=data.get("place_id"),
            licence=data.get("licence"),
            osm_type=data.get("osm_type"),
            osm_id=data.get("osm_id"),
            lat=data.get("lat"),
            lon=data.get("lon"),
            class_=data.get("class"),
            type=data.get("type"),
            place_rank=data.get("place_rank"),
            importance=data.get("importance"),
            addresstype=data.get("addresstype"),
            name=data.get("name"),
            display_name=data.get("display_name"),
            boundingbox=list(boundingbox) if isinstance(boundingbox, list) else [],
        )
