"""
Unit Tests for Application Settings Configuration

Tests for:
- Default values
- Environment variable loading (top-level and nested with ``__``)
- Custom validators (database URL, log level)
- Settings caching and clearing
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from vote_party.config.settings import (
    CatalogSettings,
    DatabaseSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep host environment and any local .env out of these tests."""
    for name in ("ENVIRONMENT", "DEBUG", "LOG_LEVEL", "DATABASE__URL", "CATALOG__ACTS_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()


class TestDatabaseSettings:
    def test_defaults(self):
        db = DatabaseSettings()

        assert db.url == "sqlite:///data/vote_party.db"
        assert db.busy_timeout_ms == 5000
        assert db.connection_timeout_s == 10

    def test_alias(self):
        db = DatabaseSettings(db_url="sqlite:///:memory:")

        assert db.url == "sqlite:///:memory:"

    @pytest.mark.parametrize("url", ["postgresql://u:p@localhost/db", "data/vote_party.db", ""])
    def test_non_sqlite_url_rejected(self, url):
        with pytest.raises(ValidationError, match="sqlite://"):
            DatabaseSettings(url=url)

    @pytest.mark.parametrize("timeout", [999, 30001])
    def test_busy_timeout_bounds(self, timeout):
        with pytest.raises(ValidationError):
            DatabaseSettings(busy_timeout_ms=timeout)

    def test_frozen(self):
        db = DatabaseSettings()

        with pytest.raises(ValidationError):
            db.url = "sqlite:///other.db"


class TestCatalogSettings:
    def test_default_path(self):
        assert CatalogSettings().acts_path == Path("data/acts.json")


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.database == DatabaseSettings()

    def test_loads_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DATABASE__URL", "sqlite:///prod.db")
        monkeypatch.setenv("CATALOG__ACTS_PATH", "/srv/acts.json")

        settings = Settings()

        assert settings.environment == "production"
        assert settings.log_level == "DEBUG"
        assert settings.database.url == "sqlite:///prod.db"
        assert settings.catalog.acts_path == Path("/srv/acts.json")

    def test_loads_dotenv(self, tmp_path):
        (tmp_path / ".env").write_text("LOG_LEVEL=warning\n", encoding="utf-8")

        assert Settings().log_level == "WARNING"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="staging")


class TestSettingsCache:
    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_clear_settings_cache(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        clear_settings_cache()

        second = get_settings()
        assert second is not first
        assert second.log_level == "ERROR"
