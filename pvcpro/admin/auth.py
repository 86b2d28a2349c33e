"""Admin password check + Redis session management.

A single shared password guards the whole admin panel. It is demo-grade
authentication and has to be replaced with per-user accounts before the
site goes to production.
"""

from __future__ import annotations

import hmac
import json
import secrets
from typing import Optional

import structlog
from redis.asyncio import Redis

logger = structlog.get_logger()

SESSION_PREFIX = "admin_session:"


def verify_password(candidate: str, expected: str) -> bool:
    """Constant-time comparison of the submitted password."""
    if not candidate or not expected:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


async def create_session(redis: Redis, ttl: int) -> str:
    """Create admin session in Redis.

    Args:
        redis: Redis client
        ttl: Session lifetime in seconds

    Returns:
        Session token (random string)
    """
    token = secrets.token_urlsafe(32)
    session_data = json.dumps({"authenticated": True})

    await redis.setex(f"{SESSION_PREFIX}{token}", ttl, session_data)

    logger.info("admin_session_created")
    return token


async def get_session(redis: Redis, token: str) -> Optional[dict]:
    """Get session data from Redis, or None if missing/expired."""
    if not token:
        return None

    data = await redis.get(f"{SESSION_PREFIX}{token}")
    if not data:
        return None

    try:
        return json.loads(data)
    except (json.JSONDecodeError, TypeError):
        return None


async def delete_session(redis: Redis, token: str) -> None:
    """Delete admin session from Redis."""
    await redis.delete(f"{SESSION_PREFIX}{token}")
