# Key generation strategies

from .base import KeyGenerator, NumberStrategy
from .counter import CounterStrategy, RedisCounter
from .encoder import ALPHABET, KeyEncoder, max_number_for_width
from .errors import (
    GeneratorConfigurationError,
    GeneratorConnectionError,
    GeneratorError,
    GeneratorNotFoundError,
    GeneratorUnknownError,
)
from .primitive_root import PrimitiveRootParams, PrimitiveRootStrategy, modular_pow
from .random_strategy import RandomStrategy

__all__ = [
    "ALPHABET",
    "CounterStrategy",
    "GeneratorConfigurationError",
    "GeneratorConnectionError",
    "GeneratorError",
    "GeneratorNotFoundError",
    "GeneratorUnknownError",
    "KeyEncoder",
    "KeyGenerator",
    "NumberStrategy",
    "PrimitiveRootParams",
    "PrimitiveRootStrategy",
    "RandomStrategy",
    "RedisCounter",
    "max_number_for_width",
    "modular_pow",
]
