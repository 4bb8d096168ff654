"""Shared helpers for Location use cases"""
from __future__ import annotations

from location_api.application.errors import ValidationError
from location_api.domain.location import LocationId


def to_location_id(raw: str | None) -> LocationId:
    """パスパラメータを LocationId に変換（空なら ValidationError）"""
    try:
        return LocationId(raw or "")
    except ValueError as e:
        raise ValidationError(str(e)) from e
