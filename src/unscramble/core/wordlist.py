from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Union

from unscramble.config import MAX_WORDS

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class LoadResult(NamedTuple):
    """Outcome of one dictionary load."""
    count: int                        # words placed into the store
    missing: bool = False             # the file could not be opened
    capacity_exceeded: bool = False   # tokens were left unread at the capacity bound


def _read_tokens(path: Path) -> Optional[List[str]]:
    """
    Read a text file and return its whitespace-separated tokens.

    Notes
    -----
    - Returns None (not an empty list) if the file is missing or unreadable,
      so callers can tell "no file" from "empty file".
    - Words are kept exactly as written; no case folding or filtering.
    """
    try:
        raw = path.read_text(errors="ignore")
    except OSError as exc:
        logger.warning("Could not open dictionary %s: %s", path, exc)
        return None
    return raw.split()


class WordStore:
    """
    Ordered, capacity-bounded list of dictionary words.

    The store never holds more than `capacity` words. Loads that would go past
    the bound stop there and flag `capacity_exceeded` in their `LoadResult`.
    """

    def __init__(self, words: Optional[List[str]] = None, capacity: int = MAX_WORDS) -> None:
        if capacity < 0:
            raise ValueError("`capacity` must be >= 0.")
        words = list(words or [])
        if len(words) > capacity:
            raise ValueError(f"{len(words)} words exceed capacity {capacity}.")
        self.capacity = capacity
        self._words = words

    @property
    def words(self) -> List[str]:
        return list(self._words)

    @property
    def remaining(self) -> int:
        return self.capacity - len(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def load(self, source: PathLike, start_offset: int = 0) -> LoadResult:
        """
        Load words from `source`, placing them from `start_offset` onward.

        Words already stored at or after `start_offset` are replaced. If the
        file cannot be opened the store is left untouched and a result with
        `count == 0` and `missing=True` is returned.
        """
        if not 0 <= start_offset <= len(self._words):
            raise ValueError(f"`start_offset` must be within 0..{len(self._words)}.")
        path = Path(source)
        tokens = _read_tokens(path)
        if tokens is None:
            return LoadResult(count=0, missing=True)

        room = self.capacity - start_offset
        accepted = tokens[:room]
        exceeded = len(tokens) > room
        self._words = self._words[:start_offset] + accepted

        if exceeded:
            logger.warning(
                "Dictionary %s: capacity %d reached, %d word(s) not loaded",
                path, self.capacity, len(tokens) - len(accepted),
            )
        logger.info("Loaded %d word(s) from %s (store size %d)", len(accepted), path, len(self._words))
        return LoadResult(count=len(accepted), capacity_exceeded=exceeded)

    def append(self, source: PathLike) -> LoadResult:
        """Load words from `source` after the existing entries."""
        return self.load(source, start_offset=len(self._words))
