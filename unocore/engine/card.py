"""Card, Color and Value types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from unocore.engine.errors import CardMatchError, NoMatchError, WildUnplayedError


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class Value(str, Enum):
    """Face values of colored cards."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"


WILD = "wild"
WILD_DRAW_FOUR = "wild_draw_four"


@dataclass(frozen=True)
class Card:
    """A colored UNO card: a number, Skip, Reverse or Draw Two."""

    color: Color
    value: Value

    def playable_on(self, top: "AnyCard") -> None:
        """Raise a CardMatchError if this card cannot go on top of `top`."""
        if isinstance(top, WildCard):
            if top.color is None:
                raise WildUnplayedError(f"{top} on the discard pile has no color")
            if self.color != top.color:
                raise NoMatchError(f"{self} does not match the chosen color {top.color.value}")
            return
        if self.color != top.color and self.value != top.value:
            raise NoMatchError(f"{self} matches neither color nor value of {top}")

    def matches(self, top: "AnyCard") -> bool:
        """Boolean form of playable_on."""
        try:
            self.playable_on(top)
        except CardMatchError:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "card", "color": self.color.value, "value": self.value.value}

    def __str__(self) -> str:
        return f"{self.color.value}_{self.value.value}"


@dataclass(frozen=True)
class WildCard:
    """A wild card.

    ``color`` is None while the card is unplayed (in the deck or a hand) and is
    fixed to the chosen color when the card is played. A played wild is never
    re-opened, even after it is recycled back into the draw pile.
    """

    draw_4: bool = False
    color: Optional[Color] = None

    @property
    def is_played(self) -> bool:
        return self.color is not None

    def play(self, color: Color) -> "WildCard":
        """Return the played copy of this wild with `color` chosen."""
        if self.is_played:
            raise ValueError(f"{self} already has a color")
        return WildCard(draw_4=self.draw_4, color=Color(color))

    def unplayed(self) -> "WildCard":
        """Return the colorless form of this wild (how it sits in a fresh hand)."""
        return WildCard(draw_4=self.draw_4)

    def playable_on(self, top: "AnyCard") -> None:
        # Wilds go on anything once their color is chosen.
        if not self.is_played:
            raise WildUnplayedError(f"{self} must have a color chosen before it is played")

    def matches(self, top: "AnyCard") -> bool:
        """A wild matches anything once it has a color."""
        return self.is_played

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "wild",
            "draw_4": self.draw_4,
            "color": self.color.value if self.color is not None else None,
        }

    def __str__(self) -> str:
        name = WILD_DRAW_FOUR if self.draw_4 else WILD
        if self.color is None:
            return name
        return f"{name}:{self.color.value}"


AnyCard = Union[Card, WildCard]


def color_permutations() -> List[Card]:
    """One card for every color and value: 4 colors x 13 values = 52 cards."""
    return [Card(color=color, value=value) for color in Color for value in Value]


def card_from_dict(data: Dict[str, Any]) -> AnyCard:
    """Inverse of ``to_dict`` on either card type."""
    kind = data.get("kind")
    if kind == "card":
        return Card(color=Color(data["color"]), value=Value(data["value"]))
    if kind == "wild":
        color = data.get("color")
        return WildCard(
            draw_4=bool(data["draw_4"]),
            color=Color(color) if color is not None else None,
        )
    raise ValueError(f"Unknown card kind: {kind!r}")


def parse_card(text: str) -> AnyCard:
    """Parse the text form produced by ``str(card)``.

    Accepted examples:
    - 'red_5', 'blue_skip', 'green_draw_two'
    - 'wild', 'wild_draw_four'
    - 'wild:green', 'wild_draw_four:red' (a played wild)
    """
    s = text.strip().lower()

    name, _, chosen = s.partition(":")
    if name in (WILD, WILD_DRAW_FOUR):
        wild = WildCard(draw_4=name == WILD_DRAW_FOUR)
        if not chosen:
            return wild
        try:
            return wild.play(Color(chosen))
        except ValueError:
            raise ValueError(f"Bad wild color in {text!r}") from None
    if chosen:
        raise ValueError(f"Only wild cards take a chosen color: {text!r}")

    color, sep, value = s.partition("_")
    if not sep:
        raise ValueError(f"Bad card format: {text!r}")
    try:
        return Card(color=Color(color), value=Value(value))
    except ValueError:
        raise ValueError(f"Bad card format: {text!r}") from None
