from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Tuple

from unscramble.config import HIGH_SCORE_THRESHOLD, QUICK_THINKER_SECONDS
from .state import Achievement

logger = logging.getLogger(__name__)

Achievements = Tuple[Achievement, ...]

# (won, score, hints_used, time_taken) -> unlocked?
Condition = Callable[[bool, int, int, float], bool]

FIRST_WIN = "first_win"
HINT_MASTER = "hint_master"
HIGH_SCORER = "high_scorer"
QUICK_THINKER = "quick_thinker"

_CONDITIONS: Dict[str, Condition] = {
    FIRST_WIN: lambda won, score, hints, secs: won,
    HINT_MASTER: lambda won, score, hints, secs: won and hints == 0,
    HIGH_SCORER: lambda won, score, hints, secs: score >= HIGH_SCORE_THRESHOLD,
    QUICK_THINKER: lambda won, score, hints, secs: won and secs <= QUICK_THINKER_SECONDS,
}


def default_achievements() -> Achievements:
    """The fixed set of achievements, all locked. Each session gets its own copy."""
    return (
        Achievement(FIRST_WIN, "First Win", "Win your first game", "Congratulations!"),
        Achievement(HINT_MASTER, "Hint Master", "Win without using a hint", "Amazing!"),
        Achievement(
            HIGH_SCORER, "High Scorer",
            f"Reach a score of {HIGH_SCORE_THRESHOLD} or more", "Impressive!",
        ),
        Achievement(
            QUICK_THINKER, "Quick Thinker",
            f"Win within {QUICK_THINKER_SECONDS} seconds", "Fast thinking!",
        ),
    )


def evaluate(
    achievements: Achievements,
    won: bool,
    score: int,
    hints_used: int,
    time_taken: float,
) -> Tuple[Achievements, Achievements]:
    """
    Check every locked achievement against a finished round.

    Returns
    -------
    (achievements, newly_unlocked)
        The updated collection (same order) and the ones unlocked by this call.
        Achievements that are already unlocked are skipped, so nothing is ever
        re-locked or announced twice.
    """
    updated: List[Achievement] = []
    unlocked: List[Achievement] = []
    for ach in achievements:
        condition = _CONDITIONS.get(ach.key)
        if not ach.achieved and condition is not None and condition(won, score, hints_used, time_taken):
            ach = replace(ach, achieved=True)
            unlocked.append(ach)
            logger.info("Achievement unlocked: %s", ach.name)
        updated.append(ach)
    return tuple(updated), tuple(unlocked)


def announce(achievement: Achievement) -> str:
    return f"{achievement.announcement} You earned the achievement: {achievement.name}!"
