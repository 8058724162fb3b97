"""Agent that plays a random legal card."""

import random
from typing import Optional

from unocore.engine import AnyCard, PlayerView


class RandomAgent:
    def __init__(self, name: str = "random", rng: Optional[random.Random] = None):
        self._name = name
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return self._name

    def choose_card(
        self,
        player_view: PlayerView,
        legal_plays: list[AnyCard],
        player: int,
    ) -> Optional[AnyCard]:
        # Always play when possible to make the game progress
        if not legal_plays:
            return None
        return self._rng.choice(legal_plays)
