from __future__ import annotations

import logging
from typing import Optional

from unscramble.core.achievements import announce
from unscramble.core.errors import (
    HintLimitReached,
    InvalidDifficultyChoice,
    InvalidHintChoice,
    NoWordsForDifficulty,
    NoWordsLoaded,
)
from unscramble.core.state import RoundOutcome, RoundState
from unscramble.services.console import Console
from unscramble.services.hints import HINT_MENU, check_hint_available
from unscramble.services.session import GameSession

logger = logging.getLogger(__name__)

HINT_COMMAND = "hint"


class RoundController:
    """
    Plays one round at a time over a Console.

    State flow
    ----------
    select word -> scrambled -> awaiting guess -> (hint -> awaiting guess)*
    -> correct | attempts exhausted. Losing reveals the word; both endings
    are handed to the session for achievement checks.
    """

    def __init__(self, session: GameSession, console: Console) -> None:
        self.session = session
        self.console = console

    def play(self, band: object) -> Optional[RoundOutcome]:
        """Run a full round. Returns None if no round could be started."""
        out = self.console.write_line
        try:
            state = self.session.start_round(band)
        except (NoWordsLoaded, NoWordsForDifficulty, InvalidDifficultyChoice) as exc:
            logger.info("Round not started: %s", exc)
            out(f"Error: {exc}" if isinstance(exc, NoWordsLoaded) else str(exc))
            return None

        out(f"Anagram of the word is: {state.scrambled}")
        while not state.finished:
            guess = self.console.read_line("Guess the word (or type 'hint' for a hint): ").strip()
            if not guess:
                continue
            if guess == HINT_COMMAND:
                state = self._hint(state)
                continue
            state = self._guess(state, guess)

        if not state.won:
            out(f'Game Over! The correct answer was "{state.secret_word}"')

        outcome = self.session.conclude(state)
        for achievement in outcome.newly_unlocked:
            out(announce(achievement))
        return outcome

    def _guess(self, state: RoundState, guess: str) -> RoundState:
        out = self.console.write_line
        state, result = self.session.guess(state, guess)
        if result.correct:
            score = self.session.score
            out(f"Correct! You earned {result.points} points (including {result.combo_bonus} combo points)!")
            out(f"Current streak: {score.streak} | Max streak: {score.max_streak}")
        else:
            out(f"Incorrect guess. Attempts left: {result.attempts_left}")
        return state

    def _hint(self, state: RoundState) -> RoundState:
        out = self.console.write_line
        try:
            check_hint_available(state.hints_used)
        except HintLimitReached as exc:
            out(str(exc))
            return state

        out("")
        out("Available Hints:")
        for kind, label in HINT_MENU:
            out(f"{kind.value}. {label}")
        choice = self.console.read_line("Enter your choice: ")

        try:
            state, hint = self.session.hint(state, choice)
        except (HintLimitReached, InvalidHintChoice) as exc:
            out(str(exc))
            return state
        out(hint.text)
        out(f"Hint cost deducted. Current score: {self.session.score.score}")
        return state
