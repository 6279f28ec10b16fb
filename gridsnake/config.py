"""
Environment-driven settings for the gridsnake driver and command line.

Values come from the process environment, with a local .env file loaded
first so developers can keep their defaults out of the shell.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LEVEL = "classic"
DEFAULT_MAX_TICKS = 500
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = {"1", "true", "yes", "on"}


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return raw.lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    level: str = DEFAULT_LEVEL
    level_path: Optional[str] = None
    seed: Optional[int] = None
    tick_seconds: float = 0.0
    max_ticks: int = DEFAULT_MAX_TICKS
    latch_game_over: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read GRIDSNAKE_* variables.

        Raises:
            ValueError: If a numeric variable does not parse.
        """
        return cls(
            level=os.getenv("GRIDSNAKE_LEVEL", "").strip() or DEFAULT_LEVEL,
            level_path=os.getenv("GRIDSNAKE_LEVEL_PATH", "").strip() or None,
            seed=_get_int("GRIDSNAKE_SEED", None),
            tick_seconds=_get_float("GRIDSNAKE_TICK_SECONDS", 0.0),
            max_ticks=_get_int("GRIDSNAKE_MAX_TICKS", DEFAULT_MAX_TICKS),
            latch_game_over=_get_bool("GRIDSNAKE_LATCH_GAME_OVER", False),
            log_level=(os.getenv("GRIDSNAKE_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper(),
        )
