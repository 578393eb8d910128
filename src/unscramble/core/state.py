from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Tuple

from unscramble.config import MAX_ATTEMPTS, MAX_HINTS_PER_WORD
from .difficulty import DifficultyBand


RoundStatus = Literal["awaiting_guess", "correct", "exhausted"]
_ROUND_STATUSES = ("awaiting_guess", "correct", "exhausted")


class HintKind(Enum):
    """Hint menu entries; the value is the menu number."""
    FIRST_LETTER = 1
    WORD_LENGTH = 2
    RANDOM_LETTER = 3


@dataclass(frozen=True)
class Hint:
    """One piece of revealed information about the target word."""
    kind: HintKind
    text: str
    letter: Optional[str] = None      # FIRST_LETTER / RANDOM_LETTER
    position: Optional[int] = None    # 1-based, RANDOM_LETTER only
    length: Optional[int] = None      # WORD_LENGTH only


@dataclass(frozen=True)
class RoundState:
    """
    Immutable state of one guessing round.

    Notes
    -----
    - A round starts in "awaiting_guess" with `MAX_ATTEMPTS` attempts and no hints.
    - The engine returns a new RoundState after every guess or hint; "correct"
      and "exhausted" are terminal.
    - `started_at` is whatever the session's time source reported when the
      round was created; it is only used to compute time taken.
    """

    secret_word: str
    scrambled: str
    band: DifficultyBand
    attempts_left: int = MAX_ATTEMPTS
    hints_used: int = 0
    hints: Tuple[Hint, ...] = ()
    status: RoundStatus = "awaiting_guess"
    points: int = 0
    started_at: float = 0.0

    def __post_init__(self) -> None:
        if not self.secret_word:
            raise ValueError("`secret_word` must be non-empty.")
        if sorted(self.scrambled) != sorted(self.secret_word):
            raise ValueError("`scrambled` must be a permutation of `secret_word`.")
        if self.attempts_left < 0:
            raise ValueError("`attempts_left` must be >= 0.")
        if not 0 <= self.hints_used <= MAX_HINTS_PER_WORD:
            raise ValueError(f"`hints_used` must be within 0..{MAX_HINTS_PER_WORD}.")
        if self.status not in _ROUND_STATUSES:
            raise ValueError(f"`status` must be one of {_ROUND_STATUSES}.")

    @property
    def finished(self) -> bool:
        return self.status != "awaiting_guess"

    @property
    def won(self) -> bool:
        return self.status == "correct"

    @property
    def hints_remaining(self) -> int:
        return MAX_HINTS_PER_WORD - self.hints_used


@dataclass(frozen=True)
class ScoreState:
    """Score, best score and streak counters for a whole session."""

    score: int = 0
    high_score: int = 0
    streak: int = 0
    max_streak: int = 0

    def __post_init__(self) -> None:
        if self.streak < 0:
            raise ValueError("`streak` must be >= 0.")
        if self.max_streak < 0:
            raise ValueError("`max_streak` must be >= 0.")


@dataclass(frozen=True)
class Achievement:
    key: str
    name: str
    description: str
    announcement: str       # exclamation printed before "You earned the achievement"
    achieved: bool = False


@dataclass(frozen=True)
class GuessResult:
    """What a single guess did to the round."""
    correct: bool
    points: int = 0
    combo_bonus: int = 0
    attempts_left: int = 0


@dataclass(frozen=True)
class RoundOutcome:
    """Summary of a finished round, as handed to the front ends."""
    won: bool
    word: str
    hints_used: int
    time_taken: float
    score: int
    points: int = 0
    newly_unlocked: Tuple[Achievement, ...] = ()
