from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from .difficulty import DifficultyBand, filter_words
from .errors import NoWordsForDifficulty, NoWordsLoaded, RoundOver
from .scoring import apply_correct, apply_game_over, apply_hint_cost, apply_incorrect_attempt
from .scrambler import scramble
from .state import GuessResult, Hint, RoundState, ScoreState

logger = logging.getLogger(__name__)


def new_round(
    words: Sequence[str],
    band: DifficultyBand,
    rng: Optional[random.Random] = None,
    started_at: float = 0.0,
) -> RoundState:
    """
    Pick a word for `band`, scramble it and return a round awaiting its first guess.

    Raises
    ------
    NoWordsLoaded
        If `words` is empty.
    NoWordsForDifficulty
        If no loaded word falls in `band`. No round is created in either case.
    """
    if not words:
        raise NoWordsLoaded()
    pool = filter_words(words, band)
    if not pool:
        raise NoWordsForDifficulty(band)

    rng = rng or random
    word = rng.choice(pool)
    logger.info("New %s round (%d candidate words)", band.label, len(pool))
    return RoundState(secret_word=word, scrambled=scramble(word, rng), band=band, started_at=started_at)


def _ensure_open(state: RoundState) -> None:
    if state.finished:
        raise RoundOver(f"The round is already over ({state.status}).")


def record_hint(
    state: RoundState,
    score: ScoreState,
    hint: Hint,
    hints_used: int,
    cost_delta: int,
) -> Tuple[RoundState, ScoreState]:
    """
    Apply a granted hint: store it on the round and charge its cost.

    A hint never consumes an attempt; the round stays in "awaiting_guess".
    """
    _ensure_open(state)
    new_state = replace(state, hints_used=hints_used, hints=state.hints + (hint,))
    return new_state, apply_hint_cost(score, cost_delta)


def submit_guess(
    state: RoundState,
    score: ScoreState,
    guess: str,
) -> Tuple[RoundState, ScoreState, GuessResult]:
    """
    Apply one guess and return the new round, new score and what happened.

    Behavior
    --------
    - Exact match (after stripping whitespace) ends the round as "correct" and
      awards length + combo bonus.
    - Anything else costs an attempt and breaks the streak.
    - Running out of attempts ends the round as "exhausted" and wipes the score.
    """
    _ensure_open(state)
    attempt = (guess or "").strip()

    if attempt == state.secret_word:
        new_score, points = apply_correct(score, len(state.secret_word))
        bonus = points - len(state.secret_word)
        new_state = replace(state, status="correct", points=points)
        return new_state, new_score, GuessResult(
            correct=True, points=points, combo_bonus=bonus, attempts_left=state.attempts_left,
        )

    attempts = state.attempts_left - 1
    new_score = apply_incorrect_attempt(score)
    status = "awaiting_guess"
    if attempts <= 0:
        attempts = 0
        status = "exhausted"
        new_score = apply_game_over(new_score)
    new_state = replace(state, attempts_left=attempts, status=status)
    return new_state, new_score, GuessResult(correct=False, attempts_left=attempts)
