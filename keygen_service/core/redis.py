"""
Redis connection for the shared counter store.
"""
from typing import Optional

import redis.asyncio as aioredis

from ..logger import logger

# Process-wide Redis client
redis_client: Optional[aioredis.Redis] = None


def init_redis(url: str) -> aioredis.Redis:
    """Create the Redis client. No connection is made until the first command."""
    global redis_client
    redis_client = aioredis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True,
        max_connections=50
    )
    logger.system("Redis client created")
    return redis_client


async def close_redis():
    """Close the Redis client"""
    global redis_client
    if redis_client is not None:
        await redis_client.aclose()
        redis_client = None
        logger.system("Redis client closed")

