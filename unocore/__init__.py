"""UNO rules engine: cards, deck and the turn state machine."""

__version__ = "0.1.0"
