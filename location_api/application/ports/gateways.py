"""Gateway Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from location_api.domain.location import GeocodeCandidate


class IGeocodingGateway(ABC):
    """
    Geocoding Gateway Interface

    都市・州・国からロケーション候補を検索する外部サービスを抽象化する。
    """

    @abstractmethod
    async def search(
        self,
        city: str,
        state: str,
        country: str,
        format: str = "json",
    ) -> list["GeocodeCandidate"]:
        """
        ロケーション候補を検索

        Args:
            city: 都市名
            state: 州名
            country: 国名
            format: レスポンス形式

        Returns:
            ジオコーダーの順序どおりの候補リスト
        """
        pass
