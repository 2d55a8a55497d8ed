"""
levels - Random level assignment for skip list nodes

Each inserted element joins levels 0..k of the list, where k is drawn here.
A draw walks the bits of a random word from the least significant end and
counts leading one-bits, so P(k) = 2^-(k+1) below the ceiling and the
remaining mass lands on the ceiling itself.
"""

import random
from typing import Optional

from skiplist_collections._config import validate_levels


# Bits taken from the generator per refill
WORD_BITS = 32


class LevelGenerator:
    """Geometric level source owned by a single container.

    Every generator has its own random.Random, so two lists never share
    random state and a seeded list is fully reproducible.

    Example:
        >>> gen = LevelGenerator(4, seed=7)
        >>> 0 <= gen.next_level() <= 3
        True
    """

    __slots__ = ('_max_levels', '_random')

    def __init__(self, max_levels: int, seed: Optional[int] = None):
        """Initialize generator.

        Args:
            max_levels: Level ceiling M; draws fall in [0, M-1]
            seed: Seed for the private random.Random (None = OS entropy)

        Raises:
            ConfigurationError: If max_levels is not a positive integer
        """
        self._max_levels = validate_levels(max_levels)
        self._random = random.Random(seed)

    @property
    def max_levels(self) -> int:
        """Level ceiling M."""
        return self._max_levels

    def next_level(self) -> int:
        """Draw a level in [0, max_levels - 1]."""
        top = self._max_levels - 1
        level = 0
        word = self._random.getrandbits(WORD_BITS)
        remaining = WORD_BITS

        while level < top and word & 1:
            level += 1
            word >>= 1
            remaining -= 1
            if remaining == 0:
                word = self._random.getrandbits(WORD_BITS)
                remaining = WORD_BITS

        return level

    def seed(self, seed: Optional[int] = None) -> None:
        """Reseed the private random state."""
        self._random.seed(seed)

    def __iter__(self):
        """Endless stream of draws."""
        while True:
            yield self.next_level()

    def __repr__(self) -> str:
        return f"LevelGenerator(max_levels={self._max_levels})"
