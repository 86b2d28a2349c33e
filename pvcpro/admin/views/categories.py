"""Category views: list, add, remove."""

from __future__ import annotations

import pathlib
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from pvcpro.admin.dependencies import get_catalog, is_admin
from pvcpro.repositories.catalog import CatalogStore

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/categories", tags=["admin-categories"])

TEMPLATES_DIR = pathlib.Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

SAVED_MESSAGES = {
    "added": "Category added successfully!",
    "removed": "Category removed successfully!",
}


def _render(
    request: Request,
    catalog: CatalogStore,
    error: Optional[str] = None,
    notice: Optional[str] = None,
    new_category: str = "",
    status_code: int = 200,
):
    rows = [
        {
            "name": category.name,
            "description": category.description,
            "products": catalog.count_in_category(category.name),
        }
        for category in catalog.categories
    ]
    return templates.TemplateResponse(
        request,
        "categories/list.html",
        {
            "active_page": "categories",
            "categories": rows,
            "new_category": new_category,
            "error": error,
            "notice": notice,
        },
        status_code=status_code,
    )


@router.get("", response_class=HTMLResponse)
async def categories_list(
    request: Request,
    saved: Optional[str] = None,
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
):
    if not authenticated:
        return RedirectResponse(url="/admin/login")

    loaded = await catalog.refresh()
    return _render(
        request,
        catalog,
        error=None if loaded else catalog.error,
        notice=SAVED_MESSAGES.get(saved or ""),
    )


@router.post("", response_class=HTMLResponse)
async def categories_create(
    request: Request,
    name: str = Form(""),
    description: str = Form(""),
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Add a category."""
    if not authenticated:
        return RedirectResponse(url="/admin/login", status_code=303)

    if not await catalog.add_category(name, description):
        return _render(
            request,
            catalog,
            error=catalog.error,
            new_category=name,
            status_code=400,
        )

    return RedirectResponse(url="/admin/categories?saved=added", status_code=303)


@router.post("/delete", response_class=HTMLResponse)
async def categories_delete(
    request: Request,
    name: str = Form(...),
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Remove a category unless products still use it."""
    if not authenticated:
        return RedirectResponse(url="/admin/login", status_code=303)

    if not await catalog.remove_category(name):
        return _render(request, catalog, error=catalog.error, status_code=409)

    return RedirectResponse(url="/admin/categories?saved=removed", status_code=303)
