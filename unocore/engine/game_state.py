"""Game state for UNO and the turn transition."""

import json
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from unocore.engine.card import AnyCard, Card, Value, WildCard
from unocore.engine.deck import FULL_DECK_SIZE, Deck, make_rng
from unocore.engine.errors import (
    CardMatchError,
    CardNotPlayableError,
    CheatingError,
    DeckExhaustedError,
    InvalidPlayerNumberError,
    NoCardsLeftError,
)

logger = logging.getLogger(__name__)


class TurnDirection(str, Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"

    @property
    def step(self) -> int:
        return 1 if self is TurnDirection.CLOCKWISE else -1

    def flipped(self) -> "TurnDirection":
        if self is TurnDirection.CLOCKWISE:
            return TurnDirection.COUNTER_CLOCKWISE
        return TurnDirection.CLOCKWISE


@dataclass
class GameState:
    """Mutable UNO game state.

    Cards only ever move between ``main_deck``, ``discard_deck`` and the
    hands, so the three always hold 108 cards between them.
    """

    main_deck: Deck
    discard_deck: Deck  # top is last
    player_hands: List[Deck]  # index is the player number
    turn_direction: TurnDirection = TurnDirection.CLOCKWISE
    current_turn: int = 0
    history: List[str] = field(default_factory=list)  # Log of accepted plays and draws
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @classmethod
    def new(
        cls,
        players: int,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> "GameState":
        """Shuffle a new deck, deal to `players` hands and flip the first discard."""
        rng = make_rng(rng, seed)
        main_deck = Deck.new(rng=rng)
        # deal to players first
        player_hands = main_deck.deal(players)
        # First card: must not be wild; set wilds aside and put them back under the deck
        first = main_deck.draw_card()
        wilds: List[AnyCard] = []
        while isinstance(first, WildCard):
            wilds.append(first)
            first = main_deck.draw_card()
        main_deck.cards[:0] = wilds
        if first is None:
            raise NoCardsLeftError("No colored card left to start the discard pile")
        logger.debug("New game for %d players, starting on %s", players, first)
        return cls(
            main_deck=main_deck,
            discard_deck=Deck([first]),
            player_hands=player_hands,
            rng=rng,
        )

    @property
    def players(self) -> int:
        return len(self.player_hands)

    @property
    def main_deck_count(self) -> int:
        return len(self.main_deck)

    @property
    def top_discard(self) -> Optional[AnyCard]:
        return self.discard_deck.top()

    @property
    def hand_sizes(self) -> List[int]:
        return [len(hand) for hand in self.player_hands]

    def hand(self, player: int) -> List[AnyCard]:
        """A copy of the cards in `player`'s hand."""
        self._check_player(player)
        return list(self.player_hands[player])

    def total_cards(self) -> int:
        return len(self.main_deck) + len(self.discard_deck) + sum(self.hand_sizes)

    def next_index(self, steps: int = 1) -> int:
        return (self.current_turn + steps * self.turn_direction.step) % self.players

    def advance(self, steps: int = 1) -> None:
        """Move the turn `steps` seats in the current direction."""
        self.current_turn = self.next_index(steps)

    def _check_player(self, player: int) -> None:
        if not 0 <= player < self.players:
            raise InvalidPlayerNumberError(player, self.players)

    def _recyclable(self) -> int:
        # everything except the top discard can go back into the main deck
        return len(self.main_deck) + max(len(self.discard_deck) - 1, 0)

    def _recycle_discard(self) -> None:
        if len(self.discard_deck) < 2:
            raise DeckExhaustedError("No cards left in the main deck or the discard pile")
        top_card = self.discard_deck.cards.pop()
        self.main_deck.extend(Deck.from_discard(self.discard_deck, rng=self.rng))
        self.discard_deck = Deck([top_card])
        logger.debug("Recycled the discard pile: %d cards back in the main deck", len(self.main_deck))

    def draw_n_cards(self, n: int) -> List[AnyCard]:
        """Draw `n` cards, recycling the discard pile into the main deck when it runs out.

        Raises DeckExhaustedError if both piles are empty. Cards drawn before
        that point go back on top of the main deck in their original order.
        """
        cards: List[AnyCard] = []
        for _ in range(n):
            card = self.main_deck.draw_card()
            if card is None:
                # move all but the top card to the main deck and shuffle
                try:
                    self._recycle_discard()
                except DeckExhaustedError:
                    self.main_deck.extend(reversed(cards))
                    raise
                card = self.main_deck.cards.pop()
            cards.append(card)
        return cards

    @staticmethod
    def _penalty(card: AnyCard) -> int:
        if isinstance(card, WildCard):
            return 4 if card.draw_4 else 0
        return 2 if card.value == Value.DRAW_TWO else 0

    def can_cover_penalty(self, card: AnyCard) -> bool:
        """Whether the piles hold enough cards for the draw penalty `card` would give."""
        # once played, the old top card can be recycled too
        return self._penalty(card) <= self._recyclable() + 1

    def _find_in_hand(self, player: int, card: AnyCard) -> Optional[int]:
        hand = self.player_hands[player]
        idx = hand.index_of(card)
        if idx is None and isinstance(card, WildCard) and card.is_played:
            # the wild was colored as it was played; the hand holds it uncolored
            idx = hand.index_of(card.unplayed())
        return idx

    def _force_draw(self, n: int) -> None:
        self.advance()
        victim = self.current_turn
        self.player_hands[victim].extend(self.draw_n_cards(n))
        self.history.append(f"player {victim} drew {n} cards (penalty)")
        self.advance()

    def try_next(self, whos_turn: int, which_card: AnyCard) -> "GameState":
        """Play `which_card` from `whos_turn`'s hand and advance the game.

        Nothing is modified if the play is rejected.

        Raises:
            InvalidPlayerNumberError: `whos_turn` is not a player of this game.
            CheatingError: the player does not hold `which_card`.
            CardNotPlayableError: `which_card` cannot go on the top discard.
            NoCardsLeftError: a Draw Two or Draw Four whose penalty the main
                deck and the discard pile cannot cover.
        """
        self._check_player(whos_turn)

        card_idx = self._find_in_hand(whos_turn, which_card)
        if card_idx is None:
            raise CheatingError(whos_turn, which_card)

        top = self.discard_deck.top()
        if top is None:
            raise DeckExhaustedError("Discard pile is empty")
        try:
            which_card.playable_on(top)
        except CardMatchError as e:
            raise CardNotPlayableError(e) from e

        if not self.can_cover_penalty(which_card):
            raise NoCardsLeftError(f"Not enough cards left to draw the penalty for {which_card}")

        self.player_hands[whos_turn].remove_at(card_idx)
        self.discard_deck.push(which_card)
        self.history.append(f"player {whos_turn} played {which_card}")
        logger.debug("Player %d played %s on %s", whos_turn, which_card, top)

        if isinstance(which_card, Card):
            if which_card.value == Value.SKIP:
                self.advance(2)
            elif which_card.value == Value.REVERSE:
                self.turn_direction = self.turn_direction.flipped()
                self.advance()
            elif which_card.value == Value.DRAW_TWO:
                self._force_draw(2)
            else:
                self.advance()
        elif isinstance(which_card, WildCard):
            if which_card.draw_4:
                self._force_draw(4)
            else:
                self.advance()
        else:
            raise TypeError(f"Unknown card type: {type(which_card).__name__}")

        return self

    def try_draw(self, whos_turn: int) -> AnyCard:
        """Draw one card into `whos_turn`'s hand instead of playing, and pass the turn."""
        self._check_player(whos_turn)
        if self._recyclable() == 0:
            raise NoCardsLeftError("No cards left to draw")

        card = self.draw_n_cards(1)[0]
        self.player_hands[whos_turn].push(card)
        self.history.append(f"player {whos_turn} drew a card")
        self.advance()
        return card

    def to_dict(self) -> Dict[str, Any]:
        return {
            "main_deck": self.main_deck.to_list(),
            "discard_deck": self.discard_deck.to_list(),
            "player_hands": [hand.to_list() for hand in self.player_hands],
            "turn_direction": self.turn_direction.value,
            "current_turn": self.current_turn,
            "history": list(self.history),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], rng: Optional[random.Random] = None) -> "GameState":
        hands = [Deck.from_list(hand) for hand in data["player_hands"]]
        current_turn = int(data.get("current_turn", 0))
        if not 0 <= current_turn < len(hands):
            raise ValueError(f"current_turn {current_turn} out of range for {len(hands)} players")
        main_deck = Deck.from_list(data["main_deck"])
        discard_deck = Deck.from_list(data["discard_deck"])
        if not discard_deck.cards:
            raise ValueError("Snapshot has an empty discard pile")
        total = len(main_deck) + len(discard_deck) + sum(len(hand) for hand in hands)
        if total != FULL_DECK_SIZE:
            raise ValueError(f"Snapshot holds {total} cards, expected {FULL_DECK_SIZE}")
        return cls(
            main_deck=main_deck,
            discard_deck=discard_deck,
            player_hands=hands,
            turn_direction=TurnDirection(data.get("turn_direction", TurnDirection.CLOCKWISE.value)),
            current_turn=current_turn,
            history=list(data.get("history", [])),
            rng=rng or random.Random(),
        )

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_json(cls, text: str, rng: Optional[random.Random] = None) -> "GameState":
        return cls.from_dict(json.loads(text), rng=rng)


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    player: int
    my_hand: List[AnyCard]
    top_discard: Optional[AnyCard]
    current_turn: int
    turn_direction: TurnDirection
    main_deck_count: int
    num_cards_per_player: List[int]  # player number -> hand size
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, player: int) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        return cls(
            player=player,
            my_hand=state.hand(player),
            top_discard=state.top_discard,
            current_turn=state.current_turn,
            turn_direction=state.turn_direction,
            main_deck_count=state.main_deck_count,
            num_cards_per_player=state.hand_sizes,
            history=list(state.history[-10:]),  # Last 10 events
        )
