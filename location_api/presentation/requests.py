"""API Gateway Request Parsing"""
from __future__ import annotations

import base64
import binascii
import json
from decimal import Decimal
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from location_api.application.errors import ValidationError


class CreateLocationRequest(BaseModel):
    """ロケーション作成リクエスト"""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    country: str = Field(..., min_length=1, description="検索する国")
    state: str = Field(..., min_length=1, description="検索する州")
    city: str = Field(..., min_length=1, description="検索する都市")
    format: str = Field(default="json", description="ジオコーダーのレスポンス形式")

    @field_validator("format", mode="before")
    @classmethod
    def default_format(cls, value: Any) -> Any:
        return value or "json"

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CreateLocationRequest:
        """
        ペイロードを検証

        必須フィールドの欠落はまとめて1つの ValidationError として報告する。
        """
        try:
            return cls.model_validate(payload)
        except pydantic.ValidationError as e:
            invalid = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise ValidationError(
                "The 'country', 'state', and 'city' body parameters are required. "
                f"Missing or invalid: {', '.join(invalid)}"
            ) from e


def get_path_parameter(event: dict[str, Any], name: str) -> str:
    """パスパラメータを取得（無ければ空文字）"""
    return (event.get("pathParameters") or {}).get(name) or ""


def _reject_constant(name: str) -> Any:
    raise ValidationError(f"The 'body' of the request contains an unsupported number: {name}")


def parse_json_body(event: dict[str, Any]) -> dict[str, Any]:
    """
    リクエストボディを JSON オブジェクトとして解析

    小数は Decimal として読み込む（DynamoDB にそのまま書き込めるように）。
    NaN・Infinity は DynamoDB に保存できないため受け付けない。
    """
    body = event.get("body") or ""
    if event.get("isBase64Encoded") and body:
        try:
            body = base64.b64decode(body).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ValidationError("The 'body' of the request could not be decoded.") from e

    if not body:
        raise ValidationError("The 'body' of the request is not defined.")

    try:
        payload = json.loads(body, parse_float=Decimal, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ValidationError(f"The 'body' of the request is not valid JSON: {e}") from e

    if payload is None:
        raise ValidationError("The 'body' of the request is not defined.")
    if not isinstance(payload, dict):
        raise ValidationError("The 'body' of the request must be a JSON object.")

    return payload
