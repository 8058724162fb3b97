"""Single game runner."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from unocore.engine import GameState, NoCardsLeftError, PlayerView, legal_plays

if TYPE_CHECKING:
    from unocore.agents.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a finished game."""

    winner: Optional[int]
    num_turns: int
    agent_names: tuple[str, ...]
    state: GameState


class GameRunner:
    """Runs a single UNO game until someone empties their hand."""

    def __init__(
        self,
        agents: Sequence["AgentProtocol"],
        seed: Optional[int] = None,
        max_turns: int = 1000,
    ):
        self._agents = list(agents)
        self._seed = seed
        self._max_turns = max_turns

    def run(self) -> GameResult:
        """Run the game and return the result."""
        state = GameState.new(len(self._agents), rng=random.Random(self._seed))
        winner: Optional[int] = None
        num_turns = 0

        while num_turns < self._max_turns:
            player = state.current_turn
            agent = self._agents[player]
            plays = legal_plays(state, player)
            view = PlayerView.from_state(state, player)
            card = agent.choose_card(view, plays, player)
            num_turns += 1

            if card is None:
                try:
                    state.try_draw(player)
                except NoCardsLeftError:
                    logger.info("Stalemate after %d turns: nothing left to draw", num_turns)
                    break
                continue

            state.try_next(player, card)
            if not state.player_hands[player]:
                winner = player
                logger.info("Player %d (%s) won after %d turns", player, agent.name, num_turns)
                break

        return GameResult(
            winner=winner,
            num_turns=num_turns,
            agent_names=tuple(a.name for a in self._agents),
            state=state,
        )
