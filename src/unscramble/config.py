"""
Game configuration.

Fixed game rules live here as module constants; the handful of settings that
vary between runs (dictionary paths, timer mode, seed, logging) are read from
the environment. A local `.env` file is loaded with python-dotenv and never
overrides variables that are already set.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Literal, Mapping, Optional

from dotenv import load_dotenv

# --- Game rules ---
MAX_WORDS: Final[int] = 200          # words held at once, across all loads
MAX_ATTEMPTS: Final[int] = 3         # wrong guesses allowed per word
HINT_COST: Final[int] = 1            # points deducted per hint
MAX_HINTS_PER_WORD: Final[int] = 2
COMBO_MULTIPLIER: Final[int] = 2     # bonus points per streak level

EASY_MIN_LENGTH: Final[int] = 3
EASY_MAX_LENGTH: Final[int] = 5
MEDIUM_MIN_LENGTH: Final[int] = 6
MEDIUM_MAX_LENGTH: Final[int] = 8
HARD_MIN_LENGTH: Final[int] = 9

HIGH_SCORE_THRESHOLD: Final[int] = 50
QUICK_THINKER_SECONDS: Final[int] = 30
PLACEHOLDER_TIME_TAKEN: Final[int] = 25

# --- Defaults for run-time settings ---
_DATA_DIR = Path("data/wordlists")
DEFAULT_DICTIONARY: Final[str] = str(_DATA_DIR / "dictionary.txt")
DEFAULT_SHOP_DICTIONARY: Final[str] = str(_DATA_DIR / "dictionary2.txt")

TimerMode = Literal["placeholder", "wallclock"]
TIMER_MODES: Final[tuple] = ("placeholder", "wallclock")


@dataclass(frozen=True)
class Settings:
    """
    Run-time settings for one game process.

    Environment variables
    ---------------------
    UNSCRAMBLE_DICTIONARY       initial word list
    UNSCRAMBLE_SHOP_DICTIONARY  word list bought in the shop
    UNSCRAMBLE_TIMER            "placeholder" (default) or "wallclock"
    UNSCRAMBLE_SEED             integer seed for reproducible games
    UNSCRAMBLE_LOG_LEVEL        logging level name (default WARNING)
    UNSCRAMBLE_LOG_DIR          directory for a dated log file (unset: no file)
    """

    dictionary: str = DEFAULT_DICTIONARY
    shop_dictionary: str = DEFAULT_SHOP_DICTIONARY
    timer: TimerMode = "placeholder"
    seed: Optional[int] = None
    log_level: str = "WARNING"
    log_dir: Optional[str] = None

    def __post_init__(self) -> None:
        if self.timer not in TIMER_MODES:
            raise ValueError(f"`timer` must be one of {TIMER_MODES}, got {self.timer!r}.")
        object.__setattr__(self, "log_level", (self.log_level or "WARNING").upper())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from `environ` (defaults to `os.environ`)."""
        env = os.environ if environ is None else environ
        seed_raw = (env.get("UNSCRAMBLE_SEED") or "").strip()
        try:
            seed = int(seed_raw) if seed_raw else None
        except ValueError:
            raise ValueError(f"UNSCRAMBLE_SEED must be an integer, got {seed_raw!r}.") from None
        return cls(
            dictionary=env.get("UNSCRAMBLE_DICTIONARY", DEFAULT_DICTIONARY),
            shop_dictionary=env.get("UNSCRAMBLE_SHOP_DICTIONARY", DEFAULT_SHOP_DICTIONARY),
            timer=env.get("UNSCRAMBLE_TIMER", "placeholder").strip().lower(),
            seed=seed,
            log_level=env.get("UNSCRAMBLE_LOG_LEVEL", "WARNING"),
            log_dir=env.get("UNSCRAMBLE_LOG_DIR") or None,
        )


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Load `.env` into the process environment, then read settings from it."""
    load_dotenv(dotenv_path, override=False)
    return Settings.from_env()
