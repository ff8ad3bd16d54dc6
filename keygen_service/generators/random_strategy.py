"""
Uniform random key strategy.
"""
import random
from typing import Optional

from .base import NumberStrategy
from .encoder import KeyEncoder


class RandomStrategy(NumberStrategy):
    """
    Draws integers uniformly from ``[0, max_number]``.

    Nothing prevents repeats; the collision rate follows the birthday bound
    over the key space.
    """

    name = "random"

    def __init__(self, encoder: KeyEncoder, rng: Optional[random.Random] = None):
        self._max_number = encoder.max_number
        self._rng = rng or random.Random()

    @property
    def max_number(self) -> int:
        return self._max_number

    async def next_number(self) -> int:
        return self._rng.randint(0, self._max_number)
