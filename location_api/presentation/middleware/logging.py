"""Invocation Logging Middleware"""
from __future__ import annotations

from typing import Any

import structlog


def bind_invocation_context(event: dict[str, Any], context: Any, operation: str) -> None:
    """
    呼び出しごとのログコンテキストを設定

    Lambda の実行環境は再利用されるため、毎回コンテキストをクリアしてから束縛する。
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        operation=operation,
        aws_request_id=getattr(context, "aws_request_id", None),
        http_method=event.get("httpMethod"),
        path=event.get("path"),
    )
