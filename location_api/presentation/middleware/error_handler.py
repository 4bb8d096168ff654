"""Error Handler Middleware"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from location_api.application.errors import ErrorKind, LocationApiError
from location_api.presentation.responses import error_body, send_response

logger = structlog.get_logger()


@dataclass(frozen=True)
class OperationMessages:
    """操作ごとの固定メッセージ（ユーザー向け文言は失敗の詳細に依存しない）"""

    success: str
    log: str
    user: str


# 失敗の種類 → HTTP ステータス
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.CONFIGURATION: 500,
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UPSTREAM: 500,
    ErrorKind.STORE: 500,
}


def status_for(exc: Exception) -> int:
    """例外から HTTP ステータスを決定"""
    if isinstance(exc, LocationApiError):
        return STATUS_BY_KIND.get(exc.kind, 500)
    return 500


def error_response(exc: Exception, messages: OperationMessages) -> dict[str, Any]:
    """例外を統一された失敗エンベロープに変換"""
    status_code = status_for(exc)

    if isinstance(exc, LocationApiError):
        if status_code < 500:
            logger.warning("request_rejected", kind=exc.kind.value, error=str(exc))
        else:
            logger.error("request_failed", kind=exc.kind.value, error=str(exc))
    else:
        logger.error("unhandled_error", error=str(exc), exc_info=True)

    return send_response(
        status_code,
        error_body(messages.log, str(exc), messages.user),
    )
