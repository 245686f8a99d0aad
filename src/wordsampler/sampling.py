"""Uniform random sampling without replacement (Fisher-Yates)."""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomProvider(Protocol):
    """Anything that can pick a uniform integer in [0, n). random.Random qualifies."""

    def randrange(self, n: int) -> int: ...


_SYSTEM_RANDOM = random.SystemRandom()


def default_rng() -> RandomProvider:
    """Return the process-wide provider backed by the OS entropy source."""
    return _SYSTEM_RANDOM


def shuffle(items: Sequence[T], rng: RandomProvider | None = None) -> list[T]:
    """Return a shuffled copy of items. The input sequence is left untouched.

    For i from the last index down to 1, item i is swapped with an item at a
    uniformly chosen index in 0..i inclusive.
    """
    rng = rng or default_rng()
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def sample_without_replacement(
    items: Sequence[T], k: int, rng: RandomProvider | None = None
) -> list[T]:
    """Return up to k items drawn uniformly without replacement.

    When k >= len(items) every item is returned in shuffled order.
    Raises ValueError if k is negative.
    """
    if k < 0:
        raise ValueError(f"Sample size must be non-negative, got {k}.")
    shuffled = shuffle(items, rng)
    return shuffled[:min(k, len(shuffled))]
