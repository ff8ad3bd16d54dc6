"""
Shared fixtures: an in-memory stand-in for the Redis counter.
"""
from typing import List, Optional

import pytest


class StubRedis:
    """Implements the INCR call used by RedisCounter."""

    def __init__(self, start: int = 0, error: Optional[Exception] = None):
        self.value = start
        self.error = error
        self.keys: List[str] = []

    async def incr(self, key: str) -> int:
        self.keys.append(key)
        if self.error is not None:
            raise self.error
        self.value += 1
        return self.value


@pytest.fixture
def stub_redis():
    return StubRedis()
