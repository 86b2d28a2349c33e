"""Dashboard view: catalogue and quotation analytics."""

from __future__ import annotations

import pathlib

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from pvcpro.admin.dependencies import get_catalog, get_inquiries, get_quotations, is_admin
from pvcpro.catalog.analytics import category_breakdown, status_breakdown
from pvcpro.repositories.catalog import CatalogStore
from pvcpro.repositories.inquiry import InquiryStore
from pvcpro.repositories.quotation import QuotationStore

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/dashboard", tags=["admin-dashboard"])

TEMPLATES_DIR = pathlib.Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("", response_class=HTMLResponse)
async def dashboard_page(
    request: Request,
    authenticated: bool = Depends(is_admin),
    catalog: CatalogStore = Depends(get_catalog),
    quotations: QuotationStore = Depends(get_quotations),
    inquiries: InquiryStore = Depends(get_inquiries),
):
    """Counts and breakdowns across the catalogue and requests."""
    if not authenticated:
        return RedirectResponse(url="/admin/login")

    await catalog.refresh()
    await quotations.refresh()
    await inquiries.refresh()

    products = catalog.list_products()
    all_quotations = quotations.list_quotations()

    return templates.TemplateResponse(request, "dashboard.html", {
        "active_page": "dashboard",
        "products_total": len(products),
        "categories_total": len(catalog.categories),
        "quotations_total": len(all_quotations),
        "quotations_pending": quotations.status_counts()["pending"],
        "inquiries_total": len(inquiries.list_inquiries()),
        "category_shares": category_breakdown(catalog.category_names, products),
        "status_shares": status_breakdown(all_quotations),
    })
