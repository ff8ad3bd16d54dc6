"""
Generator contracts.

Strategies produce integers; ``KeyGenerator`` is the single entry point the
service calls, pairing one strategy with the encoder.
"""
from abc import ABC, abstractmethod

from .encoder import KeyEncoder
from .errors import GeneratorConfigurationError


class NumberStrategy(ABC):
    """An algorithm producing non-negative integers within the key space."""

    name: str = "abstract"

    @property
    @abstractmethod
    def max_number(self) -> int:
        """Largest integer the strategy can produce."""

    @abstractmethod
    async def next_number(self) -> int:
        """Produce the next integer within ``[0, max_number]``."""


class KeyGenerator:
    """
    Facade bound to exactly one strategy for its whole lifetime.

    Callers only see ``generate_key()``; which algorithm is behind it is
    decided once, when the generator is built.
    """

    def __init__(self, strategy: NumberStrategy, encoder: KeyEncoder):
        """
        Raises:
            GeneratorConfigurationError: If the strategy can produce numbers
                wider than the encoder can represent.
        """
        if strategy.max_number > encoder.max_number:
            raise GeneratorConfigurationError(
                f"Strategy {strategy.name} produces numbers up to {strategy.max_number}, "
                f"more than {encoder.digits} digits can hold (max {encoder.max_number})"
            )
        self._strategy = strategy
        self._encoder = encoder

    @property
    def strategy(self) -> NumberStrategy:
        return self._strategy

    @property
    def encoder(self) -> KeyEncoder:
        return self._encoder

    @property
    def name(self) -> str:
        return self._strategy.name

    async def generate_key(self) -> str:
        """
        Generate a key of exactly ``encoder.digits`` characters.

        Raises:
            GeneratorError: Propagated unchanged from the strategy.
        """
        number = await self._strategy.next_number()
        return self._encoder.encode(number)

    def __repr__(self) -> str:
        return f"KeyGenerator(strategy={self.name!r}, digits={self._encoder.digits})"
