from __future__ import annotations

from typing import Iterable, List, Protocol


class Console(Protocol):
    """Line-based input/output used by the terminal game."""

    def read_line(self, prompt: str = "") -> str:
        """Return one line of input without its newline; raise EOFError when input ends."""
        ...

    def write_line(self, text: str = "") -> None:
        ...


class StdConsole:
    """Console backed by `input()` and `print()`."""

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)

    def write_line(self, text: str = "") -> None:
        print(text)


class ScriptedConsole:
    """
    Replays a fixed list of input lines and records everything written.

    Prompts are recorded as output too, so tests can assert on the full
    transcript. Raises EOFError once the script is used up.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: List[str] = list(lines)
        self.output: List[str] = []

    def read_line(self, prompt: str = "") -> str:
        if prompt:
            self.output.append(prompt)
        if not self._lines:
            raise EOFError("script exhausted")
        return self._lines.pop(0)

    def write_line(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def transcript(self) -> str:
        return "\n".join(self.output)
