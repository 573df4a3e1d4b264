# tests/shared/test_config.py
import pytest
from pydantic import ValidationError

from patron_api.shared.config import AppEnv, Settings
from patron_api.shared.container import Container


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("PORT", "API_PREFIX", "MONGODB_URI", "APP_ENV"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.PORT == 3000
        assert settings.HOST == "0.0.0.0"
        assert settings.API_PREFIX == "/api/v1"
        assert settings.MONGODB_URI == "mongodb://localhost:27017/fundacio-molins"
        assert settings.MONGODB_COLLECTION == "patrons"
        assert settings.is_development
        assert not settings.is_production

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("MONGODB_DATABASE", "patrons-test")

        settings = Settings(_env_file=None)

        assert settings.PORT == 8080
        assert settings.APP_ENV is AppEnv.PRODUCTION
        assert settings.is_production
        assert settings.MONGODB_DATABASE == "patrons-test"

    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestContainer:

    def test_settings_built_once(self, monkeypatch):
        monkeypatch.setenv("MONGODB_DATABASE", "patrons-test")
        container = Container()

        assert container.settings() is container.settings()
        connection = container.mongo_connection()
        assert connection.database_name == "patrons-test"
        assert container.patron_repository().connection is connection

    def test_use_cases_share_repository(self, container, mock_repo):
        assert container.create_patron_use_case().repository is mock_repo
        assert container.list_patrons_use_case() is not container.list_patrons_use_case()
