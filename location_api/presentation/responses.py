"""API Gateway Response Formatter"""
from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
}


def _json_default(value: Any) -> Any:
    """DynamoDB から返る Decimal を JSON 数値に変換"""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def send_response(
    status_code: int,
    body: Any,
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """API Gateway プロキシ統合のレスポンス形式 {statusCode, headers, body}"""
    return {
        "statusCode": status_code,
        "headers": dict(DEFAULT_HEADERS) if headers is None else headers,
        "body": json.dumps(body, default=_json_default),
    }


def success_body(data: Any, user_msg: str) -> dict[str, Any]:
    """成功時のボディ {data, meta:{userMsg}}"""
    return {
        "data": data,
        "meta": {"userMsg": user_msg},
    }


def error_body(log_msg: str, error: str, user_msg: str) -> dict[str, Any]:
    """失敗時のボディ {error:{logMsg, error}, meta:{userMsg}}"""
    return {
        "error": {
            "logMsg": log_msg,
            "error": error,
        },
        "meta": {"userMsg": user_msg},
    }
