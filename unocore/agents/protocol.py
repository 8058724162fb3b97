"""Agent protocol - interface that random and human agents implement."""

from typing import Optional, Protocol

from unocore.engine import AnyCard, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def choose_card(
        self,
        player_view: PlayerView,
        legal_plays: list[AnyCard],
        player: int,
    ) -> Optional[AnyCard]:
        """Choose a card to play given the player view and legal plays.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            legal_plays: Cards that would be accepted; wilds already carry a color.
            player: This agent's player number.

        Returns:
            One of the legal plays, or None to draw a card instead.
        """
        ...
