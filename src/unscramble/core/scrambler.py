from __future__ import annotations

import random
from typing import Optional


def scramble(word: str, rng: Optional[random.Random] = None) -> str:
    """
    Return an anagram of `word`.

    Every position i is swapped with a uniformly random position k in
    [0, len(word)). This is not a uniform Fisher-Yates shuffle: some orderings
    come up more often than others and the word can come back unchanged.
    Puzzle difficulty depends on that distribution, so keep it as is.
    """
    rng = rng or random
    letters = list(word)
    n = len(letters)
    for i in range(n):
        k = rng.randrange(n)
        letters[i], letters[k] = letters[k], letters[i]
    return "".join(letters)
