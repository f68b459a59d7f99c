"""
Randomness sources for shuffling.

The engine never picks its own randomness: callers pass a `RandomSource`
into `shuffle`. Two implementations are provided:

- `SeededRandom`: deterministic, same seed gives the same permutations.
  Used for tests and hand replay.
- `SecureRandom`: backed by the operating system CSPRNG via `secrets`.
  Used for real games.

Both draw a 32-bit value per step and map it to [0, 1) as value / 2**32,
and both shuffle with Fisher-Yates, walking i from the end of the sequence
down to 1 and swapping with j = floor(next() * (i + 1)).
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import secrets
from typing import List, Sequence, TypeVar

T = TypeVar("T")

_MODULUS = 2 ** 32

# Linear congruential generator constants (Numerical Recipes)
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223


class RandomSource(ABC):
    """Abstract source of uniform random numbers in [0, 1)."""

    @abstractmethod
    def next(self) -> float:
        """Return the next random number, 0 <= x < 1."""

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """
        Return a Fisher-Yates shuffled copy of `items`.

        The input sequence is left untouched.
        """
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result


class SeededRandom(RandomSource):
    """
    Deterministic generator for tests and replays.

    Each step advances a 32-bit linear congruential state:
        state = (state * 1664525 + 1013904223) mod 2**32
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._state = seed % _MODULUS

    def next(self) -> float:
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % _MODULUS
        return self._state / _MODULUS

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed})"


class SecureRandom(RandomSource):
    """Cryptographically secure generator for production dealing."""

    def next(self) -> float:
        return secrets.randbits(32) / _MODULUS

    def __repr__(self) -> str:
        return "SecureRandom()"
