"""UNO rules: which cards a player may play right now."""

from typing import List

from unocore.engine.card import AnyCard, Color, WildCard
from unocore.engine.game_state import GameState


def _candidate_plays(card: AnyCard) -> List[AnyCard]:
    """The forms a held card can be played in. An uncolored wild can take any color."""
    if isinstance(card, WildCard) and not card.is_played:
        return [card.play(color) for color in Color]
    return [card]


def legal_plays(state: GameState, player: int) -> List[AnyCard]:
    """Return every distinct card `player` could pass to ``try_next`` now.

    Wilds come back already colored, one entry per color.
    """
    if not 0 <= player < state.players:
        return []
    top = state.top_discard
    if top is None:
        return []

    plays: List[AnyCard] = []
    for held in state.player_hands[player]:
        for card in _candidate_plays(held):
            if card.matches(top) and state.can_cover_penalty(card) and card not in plays:
                plays.append(card)
    return plays
