"""Injectable randomness for the generators.

Generators never touch the ``random`` module directly; they draw from a
:class:`RandomSource` so tests and replays can pin the exact sequence.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence, TypeVar


T = TypeVar("T")


class RandomSource(Protocol):
    def next(self) -> float:
        """Return a float in ``[0.0, 1.0)``."""


class SeededRandom:
    """Default source backed by :class:`random.Random`."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def next(self) -> float:
        return self._random.random()


def pick_index(rng: RandomSource, upper: int) -> int:
    """Map one draw onto ``range(upper)``."""

    index = int(rng.next() * upper)
    return min(max(index, 0), upper - 1)


def pick(rng: RandomSource, options: Sequence[T]) -> T:
    return options[pick_index(rng, len(options))]
