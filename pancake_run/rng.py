"""Small random-number helper used by the game."""

from __future__ import annotations

import random
import time


class RandomFunction:
    """Random integers and floats drawn from one seeded generator."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int(time.monotonic() * 1000)
        self._random = random.Random(seed)

    def get_int(self, num: int) -> int:
        """Return an integer in ``[0, num)``."""
        if num <= 0:
            raise ValueError(f"upper bound must be positive, got {num}")
        return self._random.randrange(num)

    def get_from_int_to(self, from_num: int, to_num: int) -> int:
        """Return an integer in ``[from_num, to_num]``."""
        if to_num < from_num:
            raise ValueError(f"empty range {from_num}..{to_num}")
        return self._random.randint(from_num, to_num)

    def get_float(self, num: float = 1.0) -> float:
        """Return a float between 0 and ``num``."""
        return self._random.random() * num

    def get_from_float_to(self, from_num: float, to_num: float) -> float:
        """Return a float between ``from_num`` and ``to_num``."""
        return self._random.random() * (to_num - from_num) + from_num