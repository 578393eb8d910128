from __future__ import annotations

from typing import Optional


class UnscrambleError(Exception):
    """Base class for recoverable game errors; front ends report and carry on."""


class NoWordsLoaded(UnscrambleError):
    def __init__(self, message: str = "No words loaded from the dictionary files.") -> None:
        super().__init__(message)


class NoWordsForDifficulty(UnscrambleError):
    def __init__(self, band: Optional[object] = None) -> None:
        self.band = band
        super().__init__("No words available for the selected difficulty level.")


class HintLimitReached(UnscrambleError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__("You have used all available hints for this word.")


class RoundOver(UnscrambleError):
    """Raised when a guess or hint is sent to a round that has already ended."""


class InvalidMenuInput(UnscrambleError):
    def __init__(self, choice: object, message: Optional[str] = None) -> None:
        self.choice = choice
        super().__init__(message or f"Invalid selection: {choice!r}.")


class InvalidDifficultyChoice(InvalidMenuInput):
    def __init__(self, choice: object) -> None:
        super().__init__(choice, "Invalid difficulty. Please choose 1, 2 or 3.")


class InvalidHintChoice(InvalidMenuInput):
    def __init__(self, choice: object) -> None:
        super().__init__(choice, "Invalid hint choice.")


class InvalidShopChoice(InvalidMenuInput):
    def __init__(self, choice: object) -> None:
        super().__init__(choice, "Invalid shop choice.")
