from __future__ import annotations

import random

from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything able to draw a uniform integer from [0, upper)."""

    def randbelow(self, upper: int) -> int:
        ...


class _WrappedRandom:
    """Adapt a random.Random instance to the RandomSource interface."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def randbelow(self, upper: int) -> int:
        if upper <= 0:
            msg = f'upper must be positive, got {upper}'
            raise ValueError(msg)
        return self._rng.randrange(upper)


class SystemRandomSource(_WrappedRandom):
    """Random source backed by the operating system's CSPRNG."""

    def __init__(self) -> None:
        super().__init__(random.SystemRandom())


class SeededRandomSource(_WrappedRandom):
    """
    Reproducible pseudo-random source.

    Not suitable for real passwords; intended for tests and demos where
    the same seed must yield the same output.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        super().__init__(random.Random(seed))


def default_source() -> RandomSource:
    """Return the random source used when callers do not inject one."""
    return SystemRandomSource()
