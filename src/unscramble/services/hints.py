from __future__ import annotations

import random
from typing import NamedTuple, Optional

from unscramble.config import HINT_COST, MAX_HINTS_PER_WORD
from unscramble.core.errors import HintLimitReached, InvalidHintChoice
from unscramble.core.state import Hint, HintKind


class HintResult(NamedTuple):
    hint: Hint
    hints_used: int
    cost_delta: int


HINT_MENU = (
    (HintKind.FIRST_LETTER, "Reveal the first letter"),
    (HintKind.WORD_LENGTH, "Show word length"),
    (HintKind.RANDOM_LETTER, "Reveal a random letter"),
)


def parse_hint_kind(choice: object) -> HintKind:
    """Map a hint-menu selection ("1"/"2"/"3") to a HintKind."""
    if isinstance(choice, HintKind):
        return choice
    try:
        return HintKind(int(str(choice).strip()))
    except ValueError:
        raise InvalidHintChoice(choice) from None


def check_hint_available(hints_used: int) -> None:
    """Raise HintLimitReached once the per-word hint allowance is spent."""
    if hints_used >= MAX_HINTS_PER_WORD:
        raise HintLimitReached(MAX_HINTS_PER_WORD)


def _reveal(word: str, kind: HintKind, rng) -> Hint:
    if kind is HintKind.FIRST_LETTER:
        return Hint(kind, f"First letter: {word[0]}", letter=word[0])
    if kind is HintKind.WORD_LENGTH:
        return Hint(kind, f"Word length: {len(word)} letters.", length=len(word))
    idx = rng.randrange(len(word))
    return Hint(
        kind,
        f"Revealed letter at position {idx + 1}: {word[idx]}",
        letter=word[idx],
        position=idx + 1,
    )


def use_hint(
    word: str,
    hints_used: int,
    kind: object,
    rng: Optional[random.Random] = None,
) -> HintResult:
    """
    Reveal one piece of information about `word`.

    Rules
    -----
    - The per-word limit is checked first: with `MAX_HINTS_PER_WORD` hints
      already used, HintLimitReached is raised and nothing is charged.
    - `kind` must be a HintKind (or its menu number); otherwise
      InvalidHintChoice is raised, again with no charge.
    - A granted hint bumps the counter by one and costs `HINT_COST` points.
    """
    check_hint_available(hints_used)
    hint = _reveal(word, parse_hint_kind(kind), rng or random)
    return HintResult(hint=hint, hints_used=hints_used + 1, cost_delta=-HINT_COST)


__all__ = ["HINT_MENU", "HintResult", "check_hint_available", "parse_hint_kind", "use_hint"]
