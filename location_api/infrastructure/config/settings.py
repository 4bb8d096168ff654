"""Application Settings"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from location_api.application.errors import ConfigurationError


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    テーブル名はデプロイごとに注入される。
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = ""
    app_version: str = ""
    app_stage: str = "dev"
    log_level: str = "INFO"

    # AWS
    aws_region: str = "us-east-1"

    # DynamoDB
    location_table_name: str = ""

    # Geocoder (Nominatim)
    geocoder_url: str = "https://nominatim.openstreetmap.org/search"
    geocoder_timeout_seconds: float = 10.0

    @property
    def user_agent(self) -> str:
        """ジオコーダーに送る User-Agent"""
        return f"{self.app_name}-{self.app_version}"

    def require_table_name(self) -> str:
        """テーブル名を取得（未設定なら ConfigurationError）"""
        if not self.location_table_name:
            raise ConfigurationError(
                "Table name is not defined in environment variables. "
                "Verify CloudFormation stack."
            )
        return self.location_table_name


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
