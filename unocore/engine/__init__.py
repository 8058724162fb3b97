"""Game engine for UNO."""

from unocore.engine.card import (
    AnyCard,
    Card,
    Color,
    Value,
    WildCard,
    card_from_dict,
    color_permutations,
    parse_card,
)
from unocore.engine.deck import FULL_DECK_SIZE, MAX_PLAYERS, PLAYER_STARTING_HAND_SIZE, Deck
from unocore.engine.errors import (
    CardMatchError,
    CardNotPlayableError,
    CheatingError,
    DeckExhaustedError,
    InvalidPlayerNumberError,
    NoCardsLeftError,
    NoMatchError,
    TooManyPlayersError,
    UnoError,
    WildUnplayedError,
)
from unocore.engine.game_state import GameState, PlayerView, TurnDirection
from unocore.engine.rules import legal_plays

__all__ = [
    "AnyCard",
    "Card",
    "Color",
    "Value",
    "WildCard",
    "card_from_dict",
    "color_permutations",
    "parse_card",
    "FULL_DECK_SIZE",
    "MAX_PLAYERS",
    "PLAYER_STARTING_HAND_SIZE",
    "Deck",
    "CardMatchError",
    "CardNotPlayableError",
    "CheatingError",
    "DeckExhaustedError",
    "InvalidPlayerNumberError",
    "NoCardsLeftError",
    "NoMatchError",
    "TooManyPlayersError",
    "UnoError",
    "WildUnplayedError",
    "GameState",
    "PlayerView",
    "TurnDirection",
    "legal_plays",
]
