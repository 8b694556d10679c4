"""Tests for structured logging setup."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from fridays_lies.core.config import Settings
from fridays_lies.core.logging import (
    AppContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    resolve_level,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    clear_context()
    structlog.reset_defaults()


def _last_entry(capsys: pytest.CaptureFixture[str]) -> dict:
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


class TestResolveLevel:
    """Tests for the level threshold."""

    def test_from_log_level(self) -> None:
        """Test the configured level name is used."""
        assert resolve_level(Settings(log_level="WARNING")) == logging.WARNING

    def test_debug_overrides(self) -> None:
        """Test debug mode lowers the threshold to DEBUG."""
        assert resolve_level(Settings(log_level="ERROR", debug=True)) == logging.DEBUG


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_app_context(self) -> None:
        """Test entries are stamped with the application name."""
        event = AppContext("Castaway")(None, "info", {"event": "World created"})

        assert event["app"] == "Castaway"

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON mode emits one object per line with bound context."""
        configure_logging(Settings(app_name="Castaway", json_logs=True))
        bind_context(pill="BLUE")

        get_logger("test").info("World created", entities=8)

        entry = _last_entry(capsys)
        assert entry["event"] == "World created"
        assert entry["entities"] == 8
        assert entry["pill"] == "BLUE"
        assert entry["app"] == "Castaway"
        assert entry["level"] == "info"

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test console mode renders a readable line."""
        configure_logging(Settings(json_logs=False))

        get_logger("test").info("World created")

        out = capsys.readouterr().out
        assert "World created" in out
        assert not out.lstrip().startswith("{")

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test entries below the configured level are dropped."""
        configure_logging(Settings(log_level="WARNING", json_logs=True))

        get_logger("test").info("Creature removed")
        get_logger("test").warning("Spawn placement exhausted")

        out = capsys.readouterr().out
        assert "Creature removed" not in out
        assert "Spawn placement exhausted" in out

    def test_debug_mode_shows_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test debug mode lets debug entries through."""
        configure_logging(Settings(log_level="ERROR", debug=True, json_logs=True))

        get_logger("test").debug("Session rewound", tick=3)

        assert _last_entry(capsys)["tick"] == 3

    def test_defaults_from_cached_settings(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test settings come from the environment when none are passed."""
        monkeypatch.setenv("FRIDAYS_LIES_JSON_LOGS", "true")
        monkeypatch.setenv("FRIDAYS_LIES_APP_NAME", "Island")

        configure_logging()
        get_logger("test").info("World created")

        assert _last_entry(capsys)["app"] == "Island"
