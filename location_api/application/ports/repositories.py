"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ILocationRepository(ABC):
    """
    Location Repository Interface

    外部のキー/バリューテーブルに対する薄いインターフェース。
    ストアはハンドラから見てスキーマレスであり、項目は dict として扱う。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    """

    @abstractmethod
    async def list_all(self) -> list[dict[str, Any]]:
        """全件取得（フルスキャン）"""
        pass

    @abstractmethod
    async def get(self, location_id: str) -> dict[str, Any] | None:
        """キーで1件取得、存在しなければ None"""
        pass

    @abstractmethod
    async def put(self, item: dict[str, Any]) -> None:
        """無条件に書き込み"""
        pass

    @abstractmethod
    async def update(self, location_id: str, patch: dict[str, Any]) -> None:
        """
        フィールド単位でマージ更新

        存在しないキーへの更新は LocationNotFoundError とする。
        """
        pass

    @abstractmethod
    async def delete(self, location_id: str) -> None:
        """キーで削除"""
        pass
