"""FastAPI dependencies for the admin panel and the shared stores."""

from __future__ import annotations

from typing import Optional

from fastapi import Cookie, Depends, Request
from redis.asyncio import Redis

from pvcpro.admin.auth import get_session
from pvcpro.redis_client import get_redis
from pvcpro.repositories.catalog import CatalogStore
from pvcpro.repositories.inquiry import InquiryStore
from pvcpro.repositories.quotation import QuotationStore

ADMIN_COOKIE = "admin_token"


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


def get_quotations(request: Request) -> QuotationStore:
    return request.app.state.quotations


def get_inquiries(request: Request) -> InquiryStore:
    return request.app.state.inquiries


async def is_admin(
    admin_token: Optional[str] = Cookie(None),
    redis: Redis = Depends(get_redis),
) -> bool:
    """True if the session cookie maps to a live admin session.

    Views redirect to the login page when this is False.
    """
    if not admin_token:
        return False

    session = await get_session(redis, admin_token)
    return bool(session and session.get("authenticated"))
