"""
Counter-backed key generation.

``RedisCounter`` advances a shared counter in Redis with INCR. The store
serializes concurrent increments, so no client-side locking is done here.
Failures are reported immediately, without retries.
"""
import redis.asyncio as aioredis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from ..logger import logger
from .base import NumberStrategy
from .encoder import KeyEncoder
from .errors import GeneratorConnectionError, GeneratorUnknownError

DEFAULT_COUNTER_KEY = "incr:count"


class RedisCounter:
    """Strictly increasing integers from an atomic Redis counter."""

    def __init__(self, client: aioredis.Redis, key: str = DEFAULT_COUNTER_KEY):
        self._client = client
        self.key = key

    async def next_value(self) -> int:
        """
        Increment the counter and return the new value.

        Raises:
            GeneratorConnectionError: Timeout, refused or dropped connection.
            GeneratorUnknownError: Any other error reported by Redis.
        """
        # TODO: retry policy for transient connection failures
        try:
            value = await self._client.incr(self.key)
        except (RedisConnectionError, RedisTimeoutError, OSError) as e:
            logger.counter_error("Counter store unreachable", key=self.key, error=e)
            raise GeneratorConnectionError() from e
        except RedisError as e:
            logger.counter_error("Counter store error", key=self.key, error=e)
            raise GeneratorUnknownError(str(e)) from e

        logger.counter("Counter advanced", key=self.key, value=value)
        return int(value)


class CounterStrategy(NumberStrategy):
    """
    Uses the counter value itself as the key number.

    Keys come out in order. Once the counter passes the encodable space the
    strategy refuses to produce keys rather than wrapping around.
    """

    name = "redis"

    def __init__(self, counter: RedisCounter, encoder: KeyEncoder):
        self._counter = counter
        self._max_number = encoder.max_number

    @property
    def max_number(self) -> int:
        return self._max_number

    @property
    def counter(self) -> RedisCounter:
        return self._counter

    async def next_number(self) -> int:
        value = await self._counter.next_value()
        if value < 0:
            raise GeneratorUnknownError(f"counter value {value} is negative")
        if value > self._max_number:
            raise GeneratorUnknownError(
                f"counter value {value} exceeds the key space (max {self._max_number})"
            )
        return value
