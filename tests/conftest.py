import logging
import random

import pytest

from unscramble.core.wordlist import WordStore
from unscramble.services.clock import MockTimeSource
from unscramble.services.console import ScriptedConsole
from unscramble.services.session import GameSession


class FixedRandom:
    """Stands in for random.Random where a test needs exact indices."""

    def __init__(self, values):
        self._values = list(values)

    def randrange(self, n):
        value = self._values.pop(0)
        assert 0 <= value < n
        return value

    def choice(self, seq):
        return seq[self.randrange(len(seq))]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's UNSCRAMBLE_* variables out of the tests."""
    for name in (
        "UNSCRAMBLE_DICTIONARY",
        "UNSCRAMBLE_SHOP_DICTIONARY",
        "UNSCRAMBLE_TIMER",
        "UNSCRAMBLE_SEED",
        "UNSCRAMBLE_LOG_LEVEL",
        "UNSCRAMBLE_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def rng():
    return random.Random(1)


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def write_words(tmp_path):
    """Write a dictionary file and return its path."""
    def _write(text, name="dictionary.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write


@pytest.fixture
def clock():
    return MockTimeSource()


@pytest.fixture
def make_session(rng):
    def _make(words, time_source=None):
        return GameSession(store=WordStore(list(words)), rng=rng, time_source=time_source)
    return _make


@pytest.fixture
def console_factory():
    return ScriptedConsole


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("unscramble")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
