"""
Seeded random source for the session.

One instance is created at process start and owned by the SessionState;
the shuffle at session start is its only consumer.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class RandomSource:
    """Wraps a private ``random.Random`` so no global generator state is touched."""

    def __init__(self, seed: int | None = None):
        # seed=None lets random.Random pull from os.urandom
        self._random = random.Random(seed)
        self.seed = seed

    def permutation(self, items: Sequence[T]) -> list[T]:
        """Return a uniformly random permutation of ``items`` (Fisher-Yates)."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self._random.randint(0, i)
            result[i], result[j] = result[j], result[i]
        return result

    def index(self, n: int) -> int:
        """Uniform index in ``[0, n)``."""
        if n < 1:
            raise ValueError(f"Cannot draw an index from an empty range (n={n})")
        return self._random.randrange(n)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"
