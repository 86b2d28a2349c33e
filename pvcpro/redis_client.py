"""Redis connection holding admin sessions.

One client per process, created on first use and closed on shutdown.
"""

from typing import Optional

import redis.asyncio as redis
import structlog

from pvcpro.config import settings

logger = structlog.get_logger()

_client: Optional[redis.Redis] = None


def get_redis_client() -> redis.Redis:
    global _client
    if _client is None:
        _client = redis.from_url(settings.redis_url, decode_responses=True)
        logger.debug("redis_client_created", url=settings.redis_url)
    return _client


async def get_redis() -> redis.Redis:
    """FastAPI dependency: the shared session store client."""
    return get_redis_client()


async def close_redis() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
