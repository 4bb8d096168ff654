"""Application Errors"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """失敗の種類（ハンドラ境界で HTTP ステータスに変換される）"""

    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    STORE = "store"


class LocationApiError(Exception):
    """
    アプリケーションエラーの基底クラス

    kind で失敗の種類を、detail で診断用の詳細を保持する。
    """

    kind: ErrorKind = ErrorKind.STORE

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ConfigurationError(LocationApiError):
    """設定エラー（テーブル名未設定など）"""

    kind = ErrorKind.CONFIGURATION


class ValidationError(LocationApiError):
    """リクエスト検証エラー"""

    kind = ErrorKind.VALIDATION


class LocationNotFoundError(LocationApiError):
    """ロケーションが見つからないエラー"""

    kind = ErrorKind.NOT_FOUND


class GeocodingError(LocationApiError):
    """ジオコーダー呼び出しエラー"""

    kind = ErrorKind.UPSTREAM


class LocationStoreError(LocationApiError):
    """ストア操作エラー"""

    kind = ErrorKind.STORE
