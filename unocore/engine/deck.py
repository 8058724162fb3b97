"""Deck creation, shuffling and dealing."""

import logging
import random
from typing import Any, Dict, Iterable, Iterator, List, Optional

from unocore.engine.card import AnyCard, Value, WildCard, card_from_dict, color_permutations
from unocore.engine.errors import NoCardsLeftError, TooManyPlayersError

logger = logging.getLogger(__name__)

FULL_DECK_SIZE = 108
PLAYER_STARTING_HAND_SIZE = 7
MAX_PLAYERS = 4


def make_rng(rng: Optional[random.Random], seed: Optional[int]) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed) if seed is not None else random.Random()


class Deck:
    """An ordered pile of cards. The last card is the top.

    The same type is used for the main draw deck, the discard pile and each
    player's hand.
    """

    def __init__(self, cards: Optional[Iterable[AnyCard]] = None):
        self.cards: List[AnyCard] = list(cards) if cards is not None else []

    @classmethod
    def new(cls, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> "Deck":
        """Create a shuffled standard 108-card UNO deck.

        - 4 colors x (0-9, Skip, Reverse, Draw Two), twice, but one zero per color: 100 cards
        - 4 Wild, 4 Wild Draw Four: 8 cards
        """
        cards: List[AnyCard] = []
        cards.extend(color_permutations())
        cards.extend(card for card in color_permutations() if card.value != Value.ZERO)
        for i in range(8):
            cards.append(WildCard(draw_4=i < 4))

        deck = cls(cards)
        deck.shuffle(make_rng(rng, seed))
        logger.debug("Built a fresh deck of %d cards", len(deck))
        return deck

    @classmethod
    def from_discard(
        cls,
        discard: "Deck",
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "Deck":
        """Copy the discard pile's cards into a new, reshuffled deck."""
        deck = cls(discard.cards)
        deck.shuffle(make_rng(rng, seed))
        return deck

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        (rng or random).shuffle(self.cards)

    def draw_card(self) -> Optional[AnyCard]:
        """Take the top card, or None if the deck is empty."""
        return self.cards.pop() if self.cards else None

    def deal(self, players: int, hand_size: int = PLAYER_STARTING_HAND_SIZE) -> List["Deck"]:
        """Deal `hand_size` cards to each of `players` hands, one card at a time.

        Cards go round-robin (player 0, player 1, ..., player 0, ...). If the
        deck runs out mid-deal, NoCardsLeftError is raised and the partially
        dealt cards are lost with the attempt.
        """
        if players > MAX_PLAYERS:
            raise TooManyPlayersError(players, MAX_PLAYERS)
        if players < 1:
            raise ValueError(f"Need at least one player, got {players}")

        hands = [Deck() for _ in range(players)]
        for i in range(hand_size * players):
            card = self.draw_card()
            if card is None:
                raise NoCardsLeftError(f"Deck ran out after dealing {i} cards")
            hands[i % players].push(card)
        logger.debug("Dealt %d cards to %d players", hand_size, players)
        return hands

    def top(self) -> Optional[AnyCard]:
        return self.cards[-1] if self.cards else None

    def push(self, card: AnyCard) -> None:
        self.cards.append(card)

    def extend(self, cards: Iterable[AnyCard]) -> None:
        self.cards.extend(cards)

    def index_of(self, card: AnyCard) -> Optional[int]:
        for i, c in enumerate(self.cards):
            if c == card:
                return i
        return None

    def remove_at(self, index: int) -> AnyCard:
        return self.cards.pop(index)

    def to_list(self) -> List[Dict[str, Any]]:
        return [card.to_dict() for card in self.cards]

    @classmethod
    def from_list(cls, data: Iterable[Dict[str, Any]]) -> "Deck":
        return cls(card_from_dict(d) for d in data)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[AnyCard]:
        return iter(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self.cards == other.cards

    def __repr__(self) -> str:
        return f"Deck({' '.join(str(c) for c in self.cards)})"

