from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional, Tuple, Union

from unscramble.config import Settings
from unscramble.core import achievements as achievement_tracker
from unscramble.core.difficulty import DifficultyBand, parse_band
from unscramble.core.engine import new_round, record_hint, submit_guess
from unscramble.core.errors import RoundOver
from unscramble.core.state import GuessResult, Hint, RoundOutcome, RoundState, ScoreState
from unscramble.core.wordlist import LoadResult, WordStore
from unscramble.services.clock import PlaceholderTimeSource, TimeSource, make_time_source
from unscramble.services.hints import use_hint

logger = logging.getLogger(__name__)


class GameSession:
    """
    Everything one player's game owns: words, score, achievements and the
    random/time sources. Front ends keep exactly one session and pass rounds
    back into it; the session is the only place score and achievements change.
    """

    def __init__(
        self,
        store: Optional[WordStore] = None,
        rng: Optional[random.Random] = None,
        time_source: Optional[TimeSource] = None,
    ) -> None:
        self.store = store if store is not None else WordStore()
        self.rng = rng or random.Random()
        self.time_source = time_source or PlaceholderTimeSource()
        self.score = ScoreState()
        self.achievements = achievement_tracker.default_achievements()

    @classmethod
    def from_settings(cls, settings: Settings) -> "GameSession":
        """Create an empty session with the random and time sources `settings` ask for."""
        return cls(
            rng=random.Random(settings.seed),
            time_source=make_time_source(settings.timer),
        )

    # --- Dictionary ---

    def load_dictionary(self, path: Union[str, Path]) -> LoadResult:
        return self.store.load(path)

    def buy_words(self, path: Union[str, Path]) -> LoadResult:
        """Shop purchase: append another dictionary to the loaded words."""
        result = self.store.append(path)
        logger.info("Shop: %d new word(s) from %s", result.count, path)
        return result

    # --- Rounds ---

    def start_round(self, band: Union[DifficultyBand, str, int]) -> RoundState:
        return new_round(
            self.store.words,
            parse_band(band),
            rng=self.rng,
            started_at=self.time_source.now(),
        )

    def hint(self, state: RoundState, kind: object) -> Tuple[RoundState, Hint]:
        """
        Grant one hint for the round and charge it to the score.

        HintLimitReached / InvalidHintChoice propagate with score and round unchanged.
        """
        if state.finished:
            raise RoundOver(f"The round is already over ({state.status}).")
        result = use_hint(state.secret_word, state.hints_used, kind, rng=self.rng)
        state, self.score = record_hint(state, self.score, result.hint, result.hints_used, result.cost_delta)
        return state, result.hint

    def guess(self, state: RoundState, text: str) -> Tuple[RoundState, GuessResult]:
        state, self.score, result = submit_guess(state, self.score, text)
        return state, result

    def conclude(self, state: RoundState) -> RoundOutcome:
        """
        Close a finished round: measure its time and evaluate achievements
        against the score as it stands after the round.
        """
        if not state.finished:
            raise ValueError("Cannot conclude a round that is still awaiting guesses.")
        time_taken = self.time_source.elapsed(state.started_at)
        self.achievements, unlocked = achievement_tracker.evaluate(
            self.achievements,
            won=state.won,
            score=self.score.score,
            hints_used=state.hints_used,
            time_taken=time_taken,
        )
        logger.info(
            "Round %s: word=%s hints=%d time=%.1fs score=%d",
            "won" if state.won else "lost", state.secret_word, state.hints_used, time_taken, self.score.score,
        )
        return RoundOutcome(
            won=state.won,
            word=state.secret_word,
            hints_used=state.hints_used,
            time_taken=time_taken,
            score=self.score.score,
            points=state.points,
            newly_unlocked=unlocked,
        )
