"""Tests for the game runner and agents."""

import random

from unocore.agents import RandomAgent
from unocore.engine import AnyCard, PlayerView
from unocore.orchestration import GameRunner


class DrawingAgent:
    """Never plays; always draws."""

    name = "drawer"

    def choose_card(self, player_view: PlayerView, legal_plays: list[AnyCard], player: int):
        return None


def _random_agents(n: int, seed: int = 0) -> list[RandomAgent]:
    return [RandomAgent(f"bot{i}", rng=random.Random(seed + i)) for i in range(n)]


def test_game_runs_to_completion() -> None:
    result = GameRunner(_random_agents(4), seed=42).run()
    assert result.num_turns >= 1
    assert result.state.total_cards() == 108
    assert result.agent_names == ("bot0", "bot1", "bot2", "bot3")
    if result.winner is not None:
        assert len(result.state.player_hands[result.winner]) == 0


def test_game_reproducible() -> None:
    r1 = GameRunner(_random_agents(3), seed=7).run()
    r2 = GameRunner(_random_agents(3), seed=7).run()
    assert r1.winner == r2.winner
    assert r1.num_turns == r2.num_turns
    assert r1.state.history == r2.state.history


def test_max_turns() -> None:
    result = GameRunner(_random_agents(2), seed=1, max_turns=3).run()
    assert result.num_turns <= 3


def test_drawing_agents_stalemate() -> None:
    result = GameRunner([DrawingAgent(), DrawingAgent()], seed=3).run()
    assert result.winner is None
    assert result.state.main_deck_count == 0
    assert len(result.state.discard_deck) == 1
    assert result.state.total_cards() == 108


def test_random_agent_draws_when_stuck() -> None:
    agent = RandomAgent(rng=random.Random(0))
    assert agent.choose_card(None, [], 0) is None
