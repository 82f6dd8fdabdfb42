"""
Tests for main.py - Main Entry Point

Tests for:
- Logging configuration (dictConfig and basicConfig fallback)
- Startup: schema creation, catalog load, exit codes
"""

import json
import logging
from unittest.mock import AsyncMock, MagicMock, mock_open, patch

import pytest

from vote_party.config.settings import CatalogSettings, DatabaseSettings, Settings
from vote_party.main import cli, main, setup_logging


class TestLoggingSetup:
    def _make_valid_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {},
            "loggers": {"aiosqlite": {"level": "WARNING"}},
            "root": {"level": "INFO", "handlers": []},
        }

    def test_dictconfig_called_when_json_exists(self):
        """Should call dictConfig when logging_config.json exists."""
        config = self._make_valid_config()
        with (
            patch("builtins.open", mock_open(read_data=json.dumps(config))),
            patch("logging.config.dictConfig") as mock_dc,
        ):
            setup_logging()

            mock_dc.assert_called_once_with(config)

    def test_fallback_when_json_missing(self):
        """Should fall back to basicConfig when logging_config.json is missing."""
        with (
            patch("builtins.open", side_effect=FileNotFoundError),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging("debug")

            mock_bc.assert_called_once()
            assert mock_bc.call_args.kwargs["level"] == logging.DEBUG

    def test_fallback_when_json_malformed(self):
        with (
            patch("builtins.open", mock_open(read_data="{invalid json")),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()

    def test_root_level_follows_setting(self):
        config = self._make_valid_config()
        root = logging.getLogger()
        previous = root.level
        try:
            with (
                patch("builtins.open", mock_open(read_data=json.dumps(config))),
                patch("logging.config.dictConfig"),
            ):
                setup_logging("WARNING")

            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)

    def test_shipped_config_uses_colored_formatter(self):
        """The repository's logging_config.json must name a constructible formatter."""
        from vote_party.main import _LOGGING_CONFIG_PATH
        from vote_party.utils.logging import ColoredFormatter

        config = json.loads(_LOGGING_CONFIG_PATH.read_text(encoding="utf-8"))
        formatter_config = dict(config["formatters"]["console"])
        factory = formatter_config.pop("()")

        assert factory == "vote_party.utils.logging.ColoredFormatter"
        formatter = ColoredFormatter(**formatter_config)
        assert formatter.datefmt == "%Y-%m-%d %H:%M:%S"
        assert config["handlers"]["console"]["formatter"] == "console"


class TestMain:
    @pytest.fixture
    def settings(self, acts_file):
        return Settings(
            database=DatabaseSettings(url="sqlite:///:memory:"),
            catalog=CatalogSettings(acts_path=acts_file),
        )

    def test_startup_succeeds(self, settings):
        with (
            patch("vote_party.config.settings.get_settings", return_value=settings),
            patch("vote_party.main.setup_logging"),
        ):
            assert main() == 0

    def test_missing_catalog_fails(self, settings, tmp_path):
        broken = settings.model_copy(
            update={"catalog": CatalogSettings(acts_path=tmp_path / "missing.json")}
        )
        with (
            patch("vote_party.config.settings.get_settings", return_value=broken),
            patch("vote_party.main.setup_logging"),
        ):
            assert main() == 1

    def test_container_shut_down_after_failure(self, settings):
        container = MagicMock()
        container.initialize = AsyncMock(side_effect=RuntimeError("boom"))
        container.shutdown = AsyncMock()
        with (
            patch("vote_party.config.settings.get_settings", return_value=settings),
            patch("vote_party.main.setup_logging"),
            patch("vote_party.config.container.create_container", return_value=container),
        ):
            assert main() == 1

        container.shutdown.assert_awaited_once()

    def test_cli_exits_with_main_result(self):
        with patch("vote_party.main.main", return_value=0), pytest.raises(SystemExit) as exc_info:
            cli()

        assert exc_info.value.code == 0
