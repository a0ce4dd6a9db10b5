from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The two random decisions a rewrite pass makes."""

    def chance(self, p: float) -> bool:
        """Return True with probability ``p``."""
        ...

    def choice(self, options: Sequence[T]) -> T:
        """Pick one of ``options`` uniformly."""
        ...


class SeededRandom:
    """Default :class:`RandomSource` backed by a private ``random.Random``.

    ``chance`` draws nothing at the endpoints, so a pass run at frequency 0
    leaves the generator exactly where a disabled pass would.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def chance(self, p: float) -> bool:
        if p <= 0:
            return False
        if p >= 1:
            return True
        return self._random.random() < p

    def choice(self, options: Sequence[T]) -> T:
        return self._random.choice(options)
