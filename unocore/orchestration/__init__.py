"""Game orchestration."""

from unocore.orchestration.game_runner import GameResult, GameRunner

__all__ = ["GameResult", "GameRunner"]
