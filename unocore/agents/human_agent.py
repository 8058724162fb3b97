"""Human agent - reads plays from the terminal."""

from typing import Optional

import typer

from unocore.engine import AnyCard, PlayerView


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose_card(
        self,
        player_view: PlayerView,
        legal_plays: list[AnyCard],
        player: int,
    ) -> Optional[AnyCard]:
        typer.echo(f"\n--- Player {player}, your turn ---")
        typer.echo("Your hand: " + " ".join(str(c) for c in player_view.my_hand))
        typer.echo(f"Top discard: {player_view.top_discard}")
        typer.echo("\nLegal plays:")
        typer.echo("  0: DRAW")
        for i, card in enumerate(legal_plays, start=1):
            typer.echo(f"  {i}: PLAY {card}")

        while True:
            idx = typer.prompt("Enter number", type=int, default=0 if not legal_plays else None)
            if idx == 0:
                return None
            if 1 <= idx <= len(legal_plays):
                return legal_plays[idx - 1]
            typer.echo("Invalid. Try again.")
