"""Settings Unit Tests"""
import pytest

from location_api.application.errors import ConfigurationError
from location_api.infrastructure.config import Settings


class TestSettings:
    """Settings のテスト"""

    def test_reads_environment(self, monkeypatch):
        """正常: 環境変数から読み込む"""
        monkeypatch.setenv("APP_NAME", "location-api")
        monkeypatch.setenv("APP_VERSION", "2.0.0")
        monkeypatch.setenv("APP_STAGE", "prod")
        monkeypatch.setenv("LOCATION_TABLE_NAME", "location-table-prod")

        settings = Settings(_env_file=None)

        assert settings.user_agent == "location-api-2.0.0"
        assert settings.app_stage == "prod"
        assert settings.require_table_name() == "location-table-prod"

    def test_missing_table_name_is_configuration_error(self, monkeypatch):
        """異常: テーブル名が未設定なら ConfigurationError"""
        monkeypatch.delenv("LOCATION_TABLE_NAME", raising=False)

        settings = Settings(_env_file=None)

        with pytest.raises(ConfigurationError):
            settings.require_table_name()

    def test_defaults(self, monkeypatch):
        """正常: デフォルト値"""
        monkeypatch.delenv("APP_STAGE", raising=False)
        monkeypatch.delenv("GEOCODER_URL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.app_stage == "dev"
        assert settings.geocoder_url == "https://nominatim.openstreetmap.org/search"
        assert settings.geocoder_timeout_seconds == 10.0
