"""Unit tests for deck construction and dealing."""

import random
from collections import Counter

import pytest

from unocore.engine import (
    FULL_DECK_SIZE,
    Card,
    Color,
    Deck,
    NoCardsLeftError,
    TooManyPlayersError,
    Value,
    WildCard,
    color_permutations,
)


def test_new_deck_size() -> None:
    deck = Deck.new(seed=42)
    assert len(deck) == FULL_DECK_SIZE == 108


def test_new_deck_composition() -> None:
    counts = Counter(Deck.new(seed=1))
    for color in Color:
        assert counts[Card(color, Value.ZERO)] == 1
        for value in list(Value)[1:]:
            assert counts[Card(color, value)] == 2
    assert counts[WildCard(draw_4=False)] == 4
    assert counts[WildCard(draw_4=True)] == 4
    assert sum(1 for card in Deck.new(seed=1) if isinstance(card, Card)) == 100


def test_new_deck_reproducible() -> None:
    d1 = Deck.new(seed=123)
    d2 = Deck.new(rng=random.Random(123))
    assert d1 == d2
    assert Deck.new(seed=123) != Deck.new(seed=124)


def test_draw_card_takes_top() -> None:
    deck = Deck(color_permutations()[:2])
    top = deck.top()
    assert deck.draw_card() == top
    assert len(deck) == 1
    deck.draw_card()
    assert deck.draw_card() is None
    assert deck.top() is None


def test_deal_round_robin() -> None:
    cards = color_permutations()[:10]
    deck = Deck(cards)
    hands = deck.deal(2, hand_size=3)
    # the top of the deck is the last card
    assert hands[0].cards == [cards[9], cards[7], cards[5]]
    assert hands[1].cards == [cards[8], cards[6], cards[4]]
    assert deck.cards == cards[:4]


def test_deal_full_game() -> None:
    deck = Deck.new(seed=7)
    hands = deck.deal(4)
    assert [len(h) for h in hands] == [7, 7, 7, 7]
    assert len(deck) == 108 - 28


def test_deal_runs_out() -> None:
    deck = Deck(color_permutations()[:5])
    with pytest.raises(NoCardsLeftError):
        deck.deal(3)


def test_deal_too_many_players() -> None:
    with pytest.raises(TooManyPlayersError) as exc:
        Deck.new(seed=1).deal(5)
    assert exc.value.players == 5


def test_deal_needs_a_player() -> None:
    with pytest.raises(ValueError):
        Deck.new(seed=1).deal(0)


def test_from_discard_is_a_shuffled_copy() -> None:
    discard = Deck(color_permutations())
    deck = Deck.from_discard(discard, seed=3)
    assert Counter(deck) == Counter(discard)
    assert deck.cards is not discard.cards
    assert len(discard) == 52


def test_list_form() -> None:
    deck = Deck([Card(Color.RED, Value.SKIP), WildCard(draw_4=True, color=Color.BLUE)])
    assert Deck.from_list(deck.to_list()) == deck
