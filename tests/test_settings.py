"""Tests for settings and global state."""

from unittest.mock import patch

import pytest

from launcher_mcp.config import Settings
from launcher_mcp.state import get_settings, reset_state, set_settings

LAUNCHER_VARS = [
    "LAUNCHER_TRANSPORT",
    "LAUNCHER_HTTP_HOST",
    "LAUNCHER_HTTP_PORT",
    "LAUNCHER_LOG_LEVEL",
    "LAUNCHER_LOG_COLORS",
    "LAUNCHER_LOG_PAYLOADS",
    "LAUNCHER_SLOW_THRESHOLD_MS",
    "LAUNCHER_INCLUDE_TRACEBACK",
    "LAUNCHER_LOWERCASE_PATHS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without LAUNCHER_* variables."""
    for var in LAUNCHER_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_state()
    yield
    reset_state()


def test_defaults() -> None:
    """Settings fall back to defaults when nothing is set."""
    settings = Settings.from_env()

    assert settings.transport == "http"
    assert settings.http_host == "0.0.0.0"
    assert settings.http_port == 8000
    assert settings.log_level == "INFO"
    assert settings.log_colors is True
    assert settings.log_payloads is False
    assert settings.slow_threshold_ms == 1000
    assert settings.include_traceback is False
    assert settings.lowercase_paths is True


def test_values_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables override defaults."""
    monkeypatch.setenv("LAUNCHER_TRANSPORT", "STDIO")
    monkeypatch.setenv("LAUNCHER_HTTP_PORT", "9000")
    monkeypatch.setenv("LAUNCHER_LOG_LEVEL", "debug")
    monkeypatch.setenv("LAUNCHER_LOG_PAYLOADS", "yes")
    monkeypatch.setenv("LAUNCHER_LOWERCASE_PATHS", "false")

    settings = Settings.from_env()

    assert settings.transport == "stdio"
    assert settings.http_port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.log_payloads is True
    assert settings.lowercase_paths is False


def test_invalid_int_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """A non-numeric port falls back to the default with a warning."""
    monkeypatch.setenv("LAUNCHER_HTTP_PORT", "eighty")

    with patch("launcher_mcp.config.settings.logger") as mock_logger:
        settings = Settings.from_env()

    assert settings.http_port == 8000
    mock_logger.warning.assert_called_once()
    assert "LAUNCHER_HTTP_PORT" in mock_logger.warning.call_args.args


def test_unknown_transport_uses_http(monkeypatch: pytest.MonkeyPatch) -> None:
    """An unknown transport falls back to http."""
    monkeypatch.setenv("LAUNCHER_TRANSPORT", "carrier-pigeon")
    assert Settings.from_env().transport == "http"


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    """get_settings reads the environment once until reset."""
    first = get_settings()
    monkeypatch.setenv("LAUNCHER_HTTP_PORT", "9001")

    assert get_settings() is first

    reset_state()
    assert get_settings().http_port == 9001


def test_set_settings() -> None:
    """set_settings injects a settings instance."""
    custom = Settings(transport="stdio")
    set_settings(custom)
    assert get_settings() is custom
