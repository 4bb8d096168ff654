"""Location ID Value Object"""
from __future__ import annotations

import secrets
from dataclasses import dataclass

# 16 バイト = 128 bit のエントロピー
LOCATION_ID_BYTES = 16


@dataclass(frozen=True)
class LocationId:
    """
    ロケーションID（値オブジェクト）

    パーティションキーとして使用される不透明な識別子。
    作成後は変更されない。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション"""
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("The 'locationId' path parameter is not defined.")

    @classmethod
    def generate(cls) -> LocationId:
        """暗号論的に安全な乱数から新しいIDを生成（32文字の小文字16進数）"""
        return cls(secrets.token_hex(LOCATION_ID_BYTES))

    def __str__(self) -> str:
        return self.value
