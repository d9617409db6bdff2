"""Tests for environment helpers and random names."""

import pytest

from launcher_mcp.utils.env import (
    ALPHABET,
    MAX_ENV_VALUE_LENGTH,
    get_env,
    get_random_str,
    set_env,
)


def test_set_and_get_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Values set through set_env are visible through get_env."""
    monkeypatch.delenv("LAUNCHER_TEST_VAR", raising=False)

    assert set_env("LAUNCHER_TEST_VAR", "C:\\some dir") is True
    assert get_env("LAUNCHER_TEST_VAR") == "C:\\some dir"

    monkeypatch.delenv("LAUNCHER_TEST_VAR")


def test_get_env_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables read as None."""
    monkeypatch.delenv("LAUNCHER_MISSING_VAR", raising=False)
    assert get_env("LAUNCHER_MISSING_VAR") is None


def test_set_env_rejects_long_value(monkeypatch: pytest.MonkeyPatch) -> None:
    """Values over the Windows limit are refused."""
    monkeypatch.delenv("LAUNCHER_TEST_VAR", raising=False)
    assert set_env("LAUNCHER_TEST_VAR", "x" * (MAX_ENV_VALUE_LENGTH + 1)) is False
    assert get_env("LAUNCHER_TEST_VAR") is None


def test_set_env_accepts_max_length(monkeypatch: pytest.MonkeyPatch) -> None:
    """A value exactly at the limit is accepted."""
    monkeypatch.delenv("LAUNCHER_TEST_VAR", raising=False)
    assert set_env("LAUNCHER_TEST_VAR", "x" * MAX_ENV_VALUE_LENGTH) is True
    monkeypatch.delenv("LAUNCHER_TEST_VAR")


@pytest.mark.parametrize("name", ["", "A=B", "A\x00B"])
def test_set_env_rejects_invalid_name(name: str) -> None:
    """Names that the OS cannot store are refused."""
    assert set_env(name, "value") is False


def test_random_str_length_and_alphabet() -> None:
    """Random strings have the requested length and are alphanumeric."""
    value = get_random_str(32)
    assert len(value) == 32
    assert all(c in ALPHABET for c in value)


def test_random_str_empty() -> None:
    """Zero length gives an empty string."""
    assert get_random_str(0) == ""


def test_random_str_varies() -> None:
    """Consecutive calls give different strings."""
    assert get_random_str(16) != get_random_str(16)
