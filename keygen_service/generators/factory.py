"""
Builds the key generator selected by configuration.
"""
from typing import Optional

import redis.asyncio as aioredis

from ..config import GeneratorKind, Settings
from ..logger import logger
from .base import KeyGenerator, NumberStrategy
from .counter import CounterStrategy, RedisCounter
from .errors import GeneratorConfigurationError
from .primitive_root import PrimitiveRootStrategy
from .random_strategy import RandomStrategy


def create_generator(settings: Settings, redis_client: Optional[aioredis.Redis] = None) -> KeyGenerator:
    """
    Create the generator for ``settings.GENERATOR_TYPE``.

    Args:
        settings: Service settings.
        redis_client: Counter store client, required by counter-based kinds.

    Returns:
        A KeyGenerator bound to a single strategy.

    Raises:
        GeneratorConfigurationError: If the generator cannot be built.
    """
    encoder = settings.key_encoder()
    kind = settings.GENERATOR_TYPE

    if kind.uses_counter and redis_client is None:
        raise GeneratorConfigurationError(f"Generator {kind.value} requires a Redis client")

    strategy: NumberStrategy
    if kind is GeneratorKind.RANDOM:
        strategy = RandomStrategy(encoder)
    elif kind is GeneratorKind.COUNTER:
        strategy = CounterStrategy(RedisCounter(redis_client, settings.REDIS_COUNTER_KEY), encoder)
    elif kind is GeneratorKind.MODULAR_EXPONENTIATION:
        strategy = PrimitiveRootStrategy(
            RedisCounter(redis_client, settings.REDIS_COUNTER_KEY),
            encoder,
            settings.primitive_root_params(),
            verify=settings.GENERATOR_VERIFY_PRIMITIVE,
        )
    else:
        raise GeneratorConfigurationError(f"Unsupported generator type: {kind}")

    logger.generator(
        "Key generator created",
        strategy=strategy.name,
        digits=encoder.digits,
        max_number=encoder.max_number
    )
    return KeyGenerator(strategy, encoder)
