"""Quotation views: list requests, send a quote, reject."""

from __future__ import annotations

import pathlib
from decimal import Decimal, InvalidOperation
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from pvcpro.admin.dependencies import get_quotations, is_admin
from pvcpro.repositories.quotation import QuotationStore

logger = structlog.get_logger()

router = APIRouter(prefix="/admin/quotations", tags=["admin-quotations"])

TEMPLATES_DIR = pathlib.Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

STATUS_LABELS = {
    "pending": "Pending",
    "quoted": "Quoted",
    "accepted": "Accepted",
    "rejected": "Rejected",
}


def _parse_price(raw: str) -> Optional[Decimal]:
    raw = raw.strip().lstrip("$").replace(",", "")
    if not raw:
        return None
    try:
        return Decimal(raw)
    except InvalidOperation:
        return None


def _render(
    request: Request,
    store: QuotationStore,
    status: Optional[str] = None,
    error: Optional[str] = None,
    notice: Optional[str] = None,
    status_code: int = 200,
):
    quotations = store.list_quotations()
    if status:
        quotations = [q for q in quotations if q.status.value == status]

    return templates.TemplateResponse(
        request,
        "quotations/list.html",
        {
            "active_page": "quotations",
            "quotations": quotations,
            "status_counts": store.status_counts(),
            "status_filter": status,
            "status_labels": STATUS_LABELS,
            "error": error,
            "notice": notice,
        },
        status_code=status_code,
    )


@router.get("", response_class=HTMLResponse)
async def quotations_list(
    request: Request,
    status: Optional[str] = Query(None),
    saved: Optional[str] = None,
    authenticated: bool = Depends(is_admin),
    store: QuotationStore = Depends(get_quotations),
):
    """All quotation requests, newest first."""
    if not authenticated:
        return RedirectResponse(url="/admin/login")

    loaded = await store.refresh()
    notice = "Quotation updated successfully!" if saved else None
    return _render(
        request,
        store,
        status=status,
        error=None if loaded else store.error,
        notice=notice,
    )


@router.post("/{quotation_id}/quote", response_class=HTMLResponse)
async def quotation_send(
    request: Request,
    quotation_id: str,
    admin_response: str = Form(""),
    quoted_price: str = Form(""),
    authenticated: bool = Depends(is_admin),
    store: QuotationStore = Depends(get_quotations),
):
    """Mark a request as quoted with the response text and optional price."""
    if not authenticated:
        return RedirectResponse(url="/admin/login", status_code=303)

    if not admin_response.strip():
        return _render(
            request,
            store,
            error="Enter your response to the customer.",
            status_code=400,
        )

    ok = await store.set_status(
        quotation_id,
        "quoted",
        admin_response=admin_response.strip(),
        quoted_price=_parse_price(quoted_price),
    )
    if not ok:
        return _render(request, store, error=store.error, status_code=400)

    return RedirectResponse(url="/admin/quotations?saved=1", status_code=303)


@router.post("/{quotation_id}/reject", response_class=HTMLResponse)
async def quotation_reject(
    request: Request,
    quotation_id: str,
    authenticated: bool = Depends(is_admin),
    store: QuotationStore = Depends(get_quotations),
):
    if not authenticated:
        return RedirectResponse(url="/admin/login", status_code=303)

    if not await store.set_status(quotation_id, "rejected"):
        return _render(request, store, error=store.error, status_code=400)

    return RedirectResponse(url="/admin/quotations?saved=1", status_code=303)
