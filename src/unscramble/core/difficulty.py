from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from unscramble.config import (
    EASY_MAX_LENGTH,
    EASY_MIN_LENGTH,
    HARD_MIN_LENGTH,
    MEDIUM_MAX_LENGTH,
    MEDIUM_MIN_LENGTH,
)
from .errors import InvalidDifficultyChoice


class DifficultyBand(Enum):
    """Difficulty bands; the value doubles as the menu number."""
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Inclusive (min, max) length per band; None means unbounded.
BAND_LENGTHS = {
    DifficultyBand.EASY: (EASY_MIN_LENGTH, EASY_MAX_LENGTH),
    DifficultyBand.MEDIUM: (MEDIUM_MIN_LENGTH, MEDIUM_MAX_LENGTH),
    DifficultyBand.HARD: (HARD_MIN_LENGTH, None),
}


def describe_band(band: DifficultyBand) -> str:
    """Menu text for a band, e.g. 'Easy (3-5 letters)' or 'Hard (9+ letters)'."""
    lo, hi = BAND_LENGTHS[band]
    span = f"{lo}+" if hi is None else f"{lo}-{hi}"
    return f"{band.label} ({span} letters)"


def classify(word: str) -> Optional[DifficultyBand]:
    """Return the band for `word` by length, or None when it is shorter than every band."""
    n = len(word)
    for band, (lo, hi) in BAND_LENGTHS.items():
        if n >= lo and (hi is None or n <= hi):
            return band
    return None


def filter_words(words: Iterable[str], band: DifficultyBand) -> List[str]:
    """Keep the words that classify as `band`, in their original order."""
    return [w for w in words if classify(w) is band]


def parse_band(choice: object) -> DifficultyBand:
    """
    Map a menu selection ("1", "2", "3" or the int) to a band.

    Raises
    ------
    InvalidDifficultyChoice
        For anything that is not one of the three menu numbers.
    """
    if isinstance(choice, DifficultyBand):
        return choice
    try:
        return DifficultyBand(int(str(choice).strip()))
    except ValueError:
        raise InvalidDifficultyChoice(choice) from None
