"""Main admin router: login, logout, root redirect."""

from __future__ import annotations

import pathlib
from typing import Optional

import structlog
from fastapi import APIRouter, Cookie, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from redis.asyncio import Redis

from pvcpro.admin.auth import create_session, delete_session, verify_password
from pvcpro.admin.dependencies import ADMIN_COOKIE, is_admin
from pvcpro.config import settings
from pvcpro.redis_client import get_redis

logger = structlog.get_logger()

router = APIRouter(prefix="/admin", tags=["admin-panel"])

TEMPLATES_DIR = pathlib.Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request):
    """Show the password form."""
    return templates.TemplateResponse(request, "login.html", {"error": None})


@router.post("/login")
async def login(
    request: Request,
    password: str = Form(""),
    redis: Redis = Depends(get_redis),
):
    """Check the shared admin password and open a session."""
    if not verify_password(password, settings.admin_password):
        logger.warning("admin_login_failed")
        return templates.TemplateResponse(
            request,
            "login.html",
            {"error": "Invalid password. Please try again."},
            status_code=401,
        )

    token = await create_session(redis, settings.admin_session_ttl_seconds)

    response = RedirectResponse(url="/admin/products", status_code=303)
    response.set_cookie(
        key=ADMIN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.environment != "development",
        samesite="lax",
        max_age=settings.admin_session_ttl_seconds,
    )

    logger.info("admin_login_success")
    return response


@router.get("/logout")
async def logout(
    admin_token: Optional[str] = Cookie(None),
    redis: Redis = Depends(get_redis),
):
    """Clear session and redirect to login."""
    if admin_token:
        await delete_session(redis, admin_token)

    response = RedirectResponse(url="/admin/login", status_code=303)
    response.delete_cookie(ADMIN_COOKIE)
    return response


@router.get("/", response_class=HTMLResponse)
async def admin_root(authenticated: bool = Depends(is_admin)):
    """Redirect to products or login."""
    if not authenticated:
        return RedirectResponse(url="/admin/login")
    return RedirectResponse(url="/admin/products")
