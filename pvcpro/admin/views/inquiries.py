"""Inquiries view: visitor details captured by the lead-capture modal."""

from __future__ import annotations

import pathlib

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from pvcpro.admin.dependencies import get_inquiries, is_admin
from pvcpro.repositories.inquiry import InquiryStore

router = APIRouter(prefix="/admin/inquiries", tags=["admin-inquiries"])

TEMPLATES_DIR = pathlib.Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("", response_class=HTMLResponse)
async def inquiries_list(
    request: Request,
    authenticated: bool = Depends(is_admin),
    store: InquiryStore = Depends(get_inquiries),
):
    if not authenticated:
        return RedirectResponse(url="/admin/login")

    loaded = await store.refresh()
    return templates.TemplateResponse(
        request,
        "inquiries/list.html",
        {
            "active_page": "inquiries",
            "inquiries": store.list_inquiries(),
            "error": None if loaded else store.error,
        },
    )
