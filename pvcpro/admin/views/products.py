"""Products views: list, create, edit, delete."""

from __future__ import annotations

import pathlib
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from pvcpro.admin.dependencies import get_catalog, is_admin
from pvcpro.repositories.catalog import CatalogStore

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/products", tags=["admin-products"])

TEMPLATES_DIR = pathlib.Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

EMPTY_FORM = {
    "name": "",
    "description": "",
    "category": "",
    "material": "",
    "sizeRange": "",
    "pressureRating": "",
    "temperatureRange": "",
    "image": "",
    "applications": "",
    "additionalSpecs": "",
}

SAVED_MESSAGES = {
    "added": "Product added successfully!",
    "updated": "Product updated successfully!",
    "removed": "Product removed successfully!",
}


def _render(
    request: Request,
    catalog: CatalogStore,
    form: dict,
    editing_id: Optional[str] = None,
    error: Optional[str] = None,
    notice: Optional[str] = None,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "products/list.html",
        {
            "active_page": "products",
            "products": catalog.list_products(),
            "categories": catalog.category_names,
            "form": form,
            "editing_id": editing_id,
            "form_action": f"/admin/products/{editing_id}" if editing_id else "/admin/products",
            "error": error,
            "notice": notice,
        },
        status_code=status_code,
    )


@router.get("", response_class=HTMLResponse)
async def products_list(
    request: Request,
    saved: Optional[str] = None,
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Product list with the add form."""
    if not authenticated:
        return RedirectResponse(url="/admin/login")

    loaded = await catalog.refresh()
    return _render(
        request,
        catalog,
        dict(EMPTY_FORM),
        error=None if loaded else catalog.error,
        notice=SAVED_MESSAGES.get(saved or ""),
    )


@router.post("", response_class=HTMLResponse)
async def products_create(
    request: Request,
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Create a product from the form."""
    if not authenticated:
        return RedirectResponse(url="/admin/login", status_code=303)

    fields = {**EMPTY_FORM, **dict(await request.form())}
    if not await catalog.add_product(fields):
        return _render(request, catalog, fields, error=catalog.error, status_code=400)

    return RedirectResponse(url="/admin/products?saved=added", status_code=303)


@router.post("/refresh")
async def products_refresh(
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Reload the cached catalogue from the store."""
    if not authenticated:
        return RedirectResponse(url="/admin/login", status_code=303)

    await catalog.refresh()
    return RedirectResponse(url="/admin/products", status_code=303)


@router.get("/{product_id}/edit", response_class=HTMLResponse)
async def products_edit(
    request: Request,
    product_id: str,
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Product list with the form pre-filled for editing."""
    if not authenticated:
        return RedirectResponse(url="/admin/login")

    await catalog.refresh()
    product = catalog.get_product(product_id)
    if product is None:
        return RedirectResponse(url="/admin/products")

    return _render(request, catalog, product.to_form(), editing_id=product_id)


@router.post("/{product_id}", response_class=HTMLResponse)
async def products_update(
    request: Request,
    product_id: str,
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Update a product."""
    if not authenticated:
        return RedirectResponse(url="/admin/login", status_code=303)

    fields = {**EMPTY_FORM, **dict(await request.form())}
    if not await catalog.update_product(product_id, fields):
        return _render(
            request,
            catalog,
            fields,
            editing_id=product_id,
            error=catalog.error,
            status_code=400,
        )

    return RedirectResponse(url="/admin/products?saved=updated", status_code=303)


@router.post("/{product_id}/delete")
async def products_delete(
    request: Request,
    product_id: str,
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Delete a product (confirmed in the browser)."""
    if not authenticated:
        return RedirectResponse(url="/admin/login", status_code=303)

    if not await catalog.remove_product(product_id):
        return _render(request, catalog, dict(EMPTY_FORM), error=catalog.error, status_code=400)

    return RedirectResponse(url="/admin/products?saved=removed", status_code=303)
