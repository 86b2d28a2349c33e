"""Public storefront routes: pages, quotation requests, contact, lead capture."""

from __future__ import annotations

import pathlib
import time
from typing import Any, Optional

import structlog
from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from pvcpro.admin.dependencies import get_catalog, get_inquiries, get_quotations
from pvcpro.catalog.search import ALL_CATEGORIES, filter_products
from pvcpro.config import settings
from pvcpro.lead_capture.gate import COOKIE_MAX_AGE, COOKIE_NAME, LeadCaptureGate, LeadCaptureState
from pvcpro.notifications.email import EmailRelay
from pvcpro.notifications.telegram import TelegramNotifier
from pvcpro.repositories.catalog import CatalogStore
from pvcpro.repositories.inquiry import InquiryStore
from pvcpro.repositories.quotation import QuotationStore
from pvcpro.schemas.inquiry import ContactMessage

logger = structlog.get_logger()

router = APIRouter(tags=["site"])

TEMPLATES_DIR = pathlib.Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

FEATURED_COUNT = 6
QUOTATION_SENT = "Quotation request submitted successfully! We'll get back to you within 24 hours."
INQUIRY_SAVED = "Thank you for your interest! We will contact you soon."


def get_lead_capture_gate(request: Request) -> LeadCaptureGate:
    return request.app.state.lead_capture


def get_notifier(request: Request) -> TelegramNotifier:
    return request.app.state.notifier


def get_email_relay(request: Request) -> EmailRelay:
    return request.app.state.email_relay


def _set_lead_cookie(response, gate: LeadCaptureGate, state: LeadCaptureState) -> None:
    response.set_cookie(
        key=COOKIE_NAME,
        value=gate.dump(state),
        max_age=COOKIE_MAX_AGE,
        httponly=True,
        samesite="lax",
    )


def _safe_next(next_url: Optional[str]) -> str:
    if next_url and next_url.startswith("/") and not next_url.startswith("//"):
        return next_url
    return "/"


def _page(
    request: Request,
    gate: LeadCaptureGate,
    name: str,
    context: dict[str, Any],
    status_code: int = 200,
    lead_error: Optional[str] = None,
):
    """Render a public page, opening the lead-capture modal when due."""
    now = time.time()
    state = gate.load(request.cookies.get(COOKIE_NAME))
    show_modal = lead_error is not None or gate.should_show(state, now)

    response = templates.TemplateResponse(
        request,
        name,
        {
            "site_name": settings.site_name,
            "show_lead_capture": show_modal,
            "lead_error": lead_error,
            **context,
        },
        status_code=status_code,
    )
    if show_modal and lead_error is None:
        _set_lead_cookie(response, gate, gate.mark_shown(state, now))
        logger.debug("lead_capture_shown", path=request.url.path)
    return response


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    thanks: Optional[str] = None,
    catalog: CatalogStore = Depends(get_catalog),
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    """Landing page with featured products."""
    await catalog.refresh()
    return _page(request, gate, "index.html", {
        "featured": catalog.list_products()[:FEATURED_COUNT],
        "categories": catalog.category_names,
        "notice": INQUIRY_SAVED if thanks else None,
    })


@router.get("/about", response_class=HTMLResponse)
async def about(
    request: Request,
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    return _page(request, gate, "about.html", {})


@router.get("/catalogue", response_class=HTMLResponse)
async def catalogue(
    request: Request,
    category: str = Query(ALL_CATEGORIES),
    search: str = Query(""),
    catalog: CatalogStore = Depends(get_catalog),
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    """Product grid filtered by category and free-text search."""
    await catalog.refresh()
    products = filter_products(catalog.list_products(), category=category, search=search)
    return _page(request, gate, "catalogue.html", {
        "products": products,
        "categories": catalog.category_names,
        "selected_category": category,
        "search": search,
    })


def _product_page(
    request: Request,
    gate: LeadCaptureGate,
    catalog: CatalogStore,
    product_id: str,
    form: Optional[dict[str, str]] = None,
    error: Optional[str] = None,
    notice: Optional[str] = None,
    status_code: int = 200,
):
    product = catalog.get_product(product_id)
    if product is None:
        return _page(request, gate, "product_not_found.html", {}, status_code=404)

    return _page(request, gate, "product.html", {
        "product": product,
        "form": form or {},
        "error": error,
        "notice": notice,
    }, status_code=status_code)


@router.get("/catalogue/{product_id}", response_class=HTMLResponse)
async def product_detail(
    request: Request,
    product_id: str,
    requested: Optional[str] = None,
    catalog: CatalogStore = Depends(get_catalog),
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    """Product detail with the quotation request form."""
    await catalog.refresh()
    return _product_page(
        request,
        gate,
        catalog,
        product_id,
        notice=QUOTATION_SENT if requested else None,
    )


@router.post("/catalogue/{product_id}/quotation", response_class=HTMLResponse)
async def request_quotation(
    request: Request,
    product_id: str,
    catalog: CatalogStore = Depends(get_catalog),
    quotations: QuotationStore = Depends(get_quotations),
    notifier: TelegramNotifier = Depends(get_notifier),
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    """Record a quotation request for the product."""
    await catalog.refresh()
    product = catalog.get_product(product_id)
    if product is None:
        return _page(request, gate, "product_not_found.html", {}, status_code=404)

    form = {k: v for k, v in (await request.form()).items() if isinstance(v, str)}
    quotation = await quotations.create_quotation(product, form)
    if quotation is None:
        return _product_page(
            request,
            gate,
            catalog,
            product_id,
            form=form,
            error=quotations.error,
            status_code=400,
        )

    await notifier.send_quotation_notification(quotation)
    return RedirectResponse(url=f"/catalogue/{product_id}?requested=1", status_code=303)


@router.get("/contact", response_class=HTMLResponse)
async def contact_page(
    request: Request,
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    return _page(request, gate, "contact.html", {"form": ContactMessage(), "errors": {}})


@router.post("/contact", response_class=HTMLResponse)
def contact_submit(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    company: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
    relay: EmailRelay = Depends(get_email_relay),
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    """Validate the contact form and relay it by email."""
    form = ContactMessage(
        name=name,
        email=email,
        phone=phone,
        company=company,
        subject=subject,
        message=message,
    )
    errors = form.errors()
    if errors:
        return _page(request, gate, "contact.html", {"form": form, "errors": errors}, status_code=400)

    if not relay.send_contact(form):
        return _page(request, gate, "contact.html", {
            "form": form,
            "errors": {},
            "error": "Failed to send. Please try again.",
        }, status_code=502)

    return _page(request, gate, "contact.html", {
        "form": ContactMessage(),
        "errors": {},
        "notice": "Message Sent! We'll get back to you shortly.",
    })


@router.post("/lead-capture", response_class=HTMLResponse)
async def lead_capture_submit(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    location: str = Form(""),
    message: str = Form(""),
    catalog: CatalogStore = Depends(get_catalog),
    inquiries: InquiryStore = Depends(get_inquiries),
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    """Save the visitor's details; the modal does not come back afterwards."""
    fields = {"name": name, "email": email, "phone": phone, "location": location, "message": message}
    if not await inquiries.create_inquiry(fields):
        return _page(request, gate, "index.html", {
            "featured": catalog.list_products()[:FEATURED_COUNT],
            "categories": catalog.category_names,
            "notice": None,
            "lead_form": fields,
        }, status_code=400, lead_error=inquiries.error)

    state = gate.load(request.cookies.get(COOKIE_NAME))
    response = RedirectResponse(url="/?thanks=1", status_code=303)
    _set_lead_cookie(response, gate, gate.submit(state, time.time()))
    return response


@router.post("/lead-capture/skip")
async def lead_capture_skip(
    request: Request,
    next_url: Optional[str] = Form(None, alias="next"),
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    state = gate.load(request.cookies.get(COOKIE_NAME))
    response = RedirectResponse(url=_safe_next(next_url), status_code=303)
    _set_lead_cookie(response, gate, gate.skip(state, time.time()))
    return response


@router.post("/lead-capture/dismiss")
async def lead_capture_dismiss(
    request: Request,
    next_url: Optional[str] = Form(None, alias="next"),
    gate: LeadCaptureGate = Depends(get_lead_capture_gate),
):
    state = gate.load(request.cookies.get(COOKIE_NAME))
    response = RedirectResponse(url=_safe_next(next_url), status_code=303)
    _set_lead_cookie(response, gate, gate.dismiss(state, time.time()))
    return response
