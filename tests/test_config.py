"""Tests for environment settings."""

import pytest

from unocore.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("UNOCORE_PLAYERS", "UNOCORE_SEED", "UNOCORE_MAX_TURNS", "UNOCORE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env(dotenv=False)
    assert settings == Settings(players=4, seed=None, max_turns=1000, log_level="WARNING")


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("UNOCORE_PLAYERS", "2")
    monkeypatch.setenv("UNOCORE_SEED", "99")
    monkeypatch.setenv("UNOCORE_MAX_TURNS", "50")
    monkeypatch.setenv("UNOCORE_LOG_LEVEL", "debug")
    settings = Settings.from_env(dotenv=False)
    assert settings == Settings(players=2, seed=99, max_turns=50, log_level="DEBUG")


def test_bad_int(monkeypatch) -> None:
    monkeypatch.setenv("UNOCORE_SEED", "abc")
    with pytest.raises(ValueError):
        Settings.from_env(dotenv=False)
