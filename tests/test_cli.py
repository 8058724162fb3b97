"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from unocore.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("UNOCORE_PLAYERS", "UNOCORE_SEED", "UNOCORE_MAX_TURNS", "UNOCORE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_snapshot() -> None:
    result = runner.invoke(app, ["snapshot", "--players", "2", "--seed", "1"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [len(h) for h in data["player_hands"]] == [7, 7]
    assert len(data["discard_deck"]) == 1
    assert len(data["main_deck"]) == 108 - 15
    assert data["turn_direction"] == "clockwise"
    assert data["current_turn"] == 0


def test_snapshot_players_from_env(monkeypatch) -> None:
    monkeypatch.setenv("UNOCORE_PLAYERS", "3")
    result = runner.invoke(app, ["snapshot", "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert len(json.loads(result.output)["player_hands"]) == 3


def test_snapshot_too_many_players() -> None:
    result = runner.invoke(app, ["snapshot", "--players", "5"])
    assert result.exit_code != 0


def test_play() -> None:
    result = runner.invoke(app, ["play", "--agents", "random,random", "--seed", "7", "--max-turns", "20"])
    assert result.exit_code == 0, result.output
    assert "Winner:" in result.output
    assert "Turns:" in result.output


def test_play_unknown_agent() -> None:
    result = runner.invoke(app, ["play", "--agents", "random,robot"])
    assert result.exit_code != 0
