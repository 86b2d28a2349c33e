"""Test fixtures and configuration."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from pvcpro.models import Base
from pvcpro.repositories.catalog import CatalogStore
from pvcpro.repositories.inquiry import InquiryStore
from pvcpro.repositories.quotation import QuotationStore
from pvcpro.store.client import StoreClient


class FakeRedis:
    """In-memory stand-in for the few Redis calls admin sessions make."""

    def __init__(self):
        self.data: dict[str, str] = {}

    async def setex(self, key, ttl, value):
        self.data[key] = value

    async def get(self, key):
        return self.data.get(key)

    async def delete(self, key):
        self.data.pop(key, None)


@pytest_asyncio.fixture
async def store_client():
    """StoreClient over a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield StoreClient(session_factory)

    await engine.dispose()


@pytest.fixture
def catalog(store_client):
    return CatalogStore(store_client)


@pytest.fixture
def quotations(store_client):
    return QuotationStore(store_client)


@pytest.fixture
def inquiries(store_client):
    return InquiryStore(store_client)


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def valve_fields():
    """Product form data under UI field names."""
    return {
        "name": "Ball Valve PVC",
        "description": "Full-port ball valve for on/off flow control.",
        "category": "Valves",
        "material": "PVC-U",
        "sizeRange": '1/2" - 4"',
        "pressureRating": "150 PSI",
        "temperatureRange": "0°C to 60°C",
        "image": "",
        "applications": "Irrigation\n\nPool plumbing\n",
        "additionalSpecs": "Double union",
    }


@pytest.fixture
def quotation_fields():
    return {
        "customer_name": "Jane Doe",
        "customer_email": "jane@acme.com",
        "customer_phone": "",
        "company": "Acme Plumbing",
        "quantity": "500",
        "preferred_size": '2"',
        "preferred_material": "PVC-U",
        "additional_requirements": "Delivery to site by March",
    }
