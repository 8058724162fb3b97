"""Settings read from the environment (and a .env file, if present)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from unocore.engine.deck import MAX_PLAYERS


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    players: int = MAX_PLAYERS
    seed: Optional[int] = None
    max_turns: int = 1000
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Build settings from UNOCORE_* environment variables."""
        if dotenv:
            load_dotenv()
        return cls(
            players=_env_int("UNOCORE_PLAYERS", MAX_PLAYERS),
            seed=_env_int("UNOCORE_SEED", None),
            max_turns=_env_int("UNOCORE_MAX_TURNS", 1000),
            log_level=os.environ.get("UNOCORE_LOG_LEVEL", "WARNING").upper(),
        )
