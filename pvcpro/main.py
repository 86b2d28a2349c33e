"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta

import structlog
from fastapi import FastAPI

from pvcpro.admin.router import router as admin_panel_router
from pvcpro.admin.views.categories import router as admin_categories_router
from pvcpro.admin.views.dashboard import router as admin_dashboard_router
from pvcpro.admin.views.inquiries import router as admin_inquiries_router
from pvcpro.admin.views.products import router as admin_products_router
from pvcpro.admin.views.quotations import router as admin_quotations_router
from pvcpro.api.v1.catalogue import router as catalogue_api_router
from pvcpro.catalog.defaults import DEFAULT_CATEGORIES, DEFAULT_PRODUCTS
from pvcpro.config import DEFAULT_ADMIN_PASSWORD, settings
from pvcpro.database import async_session_factory, engine
from pvcpro.lead_capture.gate import LeadCaptureGate, LeadCapturePolicy
from pvcpro.models import Base
from pvcpro.notifications.email import EmailRelay
from pvcpro.notifications.telegram import TelegramNotifier
from pvcpro.redis_client import close_redis
from pvcpro.repositories.catalog import CatalogStore
from pvcpro.repositories.inquiry import InquiryStore
from pvcpro.repositories.quotation import QuotationStore
from pvcpro.site.router import router as site_router
from pvcpro.store.client import StoreClient

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer() if settings.environment == "development"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.log_level.upper(), logging.INFO)
    ),
)

logger = structlog.get_logger()


def init_state(app: FastAPI, client: StoreClient) -> None:
    """Attach the stores and services that routers reach through dependencies."""
    app.state.catalog = CatalogStore(client)
    app.state.quotations = QuotationStore(client)
    app.state.inquiries = InquiryStore(client)
    app.state.lead_capture = LeadCaptureGate(
        policy=LeadCapturePolicy(settings.lead_capture_policy),
        rearm_after=timedelta(hours=settings.lead_capture_rearm_hours),
    )
    app.state.notifier = TelegramNotifier(
        settings.telegram_bot_token,
        settings.telegram_notify_chat_id,
    )
    app.state.email_relay = EmailRelay(
        service_id=settings.emailjs_service_id,
        template_id=settings.emailjs_template_id,
        public_key=settings.emailjs_public_key,
        api_url=settings.emailjs_api_url,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("app_starting", environment=settings.environment)
    if settings.admin_password == DEFAULT_ADMIN_PASSWORD:
        logger.warning("admin_default_password_in_use")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    init_state(app, StoreClient(async_session_factory))
    catalog: CatalogStore = app.state.catalog
    await catalog.refresh()
    if settings.seed_default_catalogue and not catalog.products and not catalog.categories:
        await catalog.seed(DEFAULT_PRODUCTS, DEFAULT_CATEGORIES)

    yield

    await close_redis()
    await engine.dispose()
    logger.info("app_shutting_down")


app = FastAPI(
    title="PVC Pro Solutions",
    description="Catalogue, quotation requests and admin dashboard for a PVC pipe supplier",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(site_router)
app.include_router(catalogue_api_router)
app.include_router(admin_panel_router)
app.include_router(admin_products_router)
app.include_router(admin_categories_router)
app.include_router(admin_quotations_router)
app.include_router(admin_inquiries_router)
app.include_router(admin_dashboard_router)
