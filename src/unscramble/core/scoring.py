from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from unscramble.config import COMBO_MULTIPLIER
from .state import ScoreState


def combo_points(word_length: int, streak_before: int) -> int:
    """Points for a correct guess: word length plus the combo bonus for the streak so far."""
    return word_length + COMBO_MULTIPLIER * streak_before


def apply_correct(state: ScoreState, word_length: int) -> Tuple[ScoreState, int]:
    """
    Award a correct guess and return `(new_state, points)`.

    Behavior
    --------
    - Points use the streak *before* this guess.
    - Streak grows by one; `max_streak` follows it upward.
    - `high_score` is raised if the new score beats it.
    """
    points = combo_points(word_length, state.streak)
    streak = state.streak + 1
    score = state.score + points
    new_state = ScoreState(
        score=score,
        high_score=max(state.high_score, score),
        streak=streak,
        max_streak=max(state.max_streak, streak),
    )
    return new_state, points


def apply_incorrect_attempt(state: ScoreState) -> ScoreState:
    """Any wrong guess breaks the combo, even with attempts left."""
    return replace(state, streak=0)


def apply_hint_cost(state: ScoreState, cost_delta: int) -> ScoreState:
    """Add a (negative) hint cost; the score may go below zero."""
    return replace(state, score=state.score + cost_delta)


def apply_game_over(state: ScoreState) -> ScoreState:
    """Losing a round wipes the whole score, not just this round's points."""
    return replace(state, score=0)
