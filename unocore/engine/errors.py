"""Errors raised by the UNO engine.

Every UnoError is raised before any state is touched, so the caller can
re-prompt and retry. DeckExhaustedError is the exception: it signals a broken
invariant and is not meant to be handled.
"""

from typing import Any


class CardMatchError(Exception):
    """Why one card cannot be played on another."""


class NoMatchError(CardMatchError):
    """The card matches neither the color nor the value of the top card."""


class WildUnplayedError(CardMatchError):
    """A wild card is involved that has no color chosen yet."""


class UnoError(Exception):
    """Base class for rejected deals and plays."""


class TooManyPlayersError(UnoError):
    def __init__(self, players: int, max_players: int = 4):
        super().__init__(f"Too many players: max {max_players}, attempted {players}")
        self.players = players
        self.max_players = max_players


class NoCardsLeftError(UnoError):
    def __init__(self, message: str = "No cards left"):
        super().__init__(message)


class InvalidPlayerNumberError(UnoError):
    def __init__(self, player: int, players: int):
        super().__init__(f"Invalid player number {player}: must be 0 through {players - 1}")
        self.player = player
        self.players = players


class CheatingError(UnoError):
    """The player does not have the specified card in their hand."""

    def __init__(self, player: int, card: Any):
        super().__init__(f"Player {player} does not have {card} in their hand")
        self.player = player
        self.card = card


class CardNotPlayableError(UnoError):
    """The chosen card doesn't match the top card of the discard pile."""

    def __init__(self, reason: CardMatchError):
        super().__init__(f"Card not playable: {reason}")
        self.reason = reason


class DeckExhaustedError(RuntimeError):
    """Main deck and discard pile are both empty during a forced draw."""
