"""Route tests through the ASGI app with an in-memory store."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
import pytest_asyncio

from pvcpro.catalog.defaults import DEFAULT_CATEGORIES, DEFAULT_PRODUCTS
from pvcpro.config import settings
from pvcpro.main import app, init_state
from pvcpro.notifications.email import EmailRelay
from pvcpro.notifications.telegram import TelegramNotifier
from pvcpro.redis_client import get_redis
from pvcpro.store.client import StoreError

MODAL = 'id="lead-capture"'


@pytest_asyncio.fixture
async def client(store_client, fake_redis):
    init_state(app, store_client)
    await app.state.catalog.seed(DEFAULT_PRODUCTS, DEFAULT_CATEGORIES)
    app.dependency_overrides[get_redis] = lambda: fake_redis

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_client(client):
    response = await client.post("/admin/login", data={"password": settings.admin_password})
    assert response.status_code == 303
    return client


def _product_id(name: str) -> str:
    return next(p.id for p in app.state.catalog.products if p.name == name)


async def _insert_elsewhere(store_client, name: str) -> None:
    """Write a product straight to the store, bypassing the app's cache."""
    await store_client.insert("products", {
        "name": name,
        "description": "Added by another worker",
        "category": "Valves",
        "material": "PVC-U",
        "size_range": '1" - 3"',
        "pressure_rating": "150 PSI",
        "temperature_range": "0°C to 60°C",
    })


class TestStorefront:

    async def test_home_lists_featured_products(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert "Ball Valve PVC" in response.text

    async def test_catalogue_filters_by_category(self, client):
        response = await client.get("/catalogue", params={"category": "Valves"})

        assert response.status_code == 200
        assert "Ball Valve PVC" in response.text
        assert "Standard PVC Flange" not in response.text

    async def test_catalogue_search(self, client):
        response = await client.get("/catalogue", params={"search": "flange"})

        assert "Standard PVC Flange" in response.text
        assert "Ball Valve PVC" not in response.text

    async def test_catalogue_shows_products_written_elsewhere(self, client, store_client):
        await client.get("/catalogue")
        await _insert_elsewhere(store_client, "Gate Valve XL")

        response = await client.get("/catalogue", params={"search": "gate valve"})

        assert "Gate Valve XL" in response.text

    async def test_quotation_saved_when_alert_fails(self, client, quotation_fields):
        app.state.notifier = TelegramNotifier(bot_token="not-a-token", chat_id="123")
        product_id = _product_id("Ball Valve PVC")

        response = await client.post(f"/catalogue/{product_id}/quotation", data=quotation_fields)

        assert response.status_code == 303
        assert len(app.state.quotations.list_quotations()) == 1

    async def test_unknown_product_is_404(self, client):
        response = await client.get("/catalogue/does-not-exist")
        assert response.status_code == 404

    async def test_quotation_request(self, client, quotation_fields):
        product_id = _product_id("Ball Valve PVC")

        response = await client.post(f"/catalogue/{product_id}/quotation", data=quotation_fields)

        assert response.status_code == 303
        assert response.headers["location"] == f"/catalogue/{product_id}?requested=1"
        [quotation] = app.state.quotations.list_quotations()
        assert quotation.status.value == "pending"
        assert quotation.product_name == "Ball Valve PVC"

    async def test_quotation_missing_fields(self, client, quotation_fields):
        product_id = _product_id("Ball Valve PVC")
        quotation_fields["customer_name"] = ""

        response = await client.post(f"/catalogue/{product_id}/quotation", data=quotation_fields)

        assert response.status_code == 400
        assert "Please fill in all required fields" in response.text
        assert app.state.quotations.list_quotations() == []


class TestLeadCapture:

    async def test_modal_shown_once_per_window(self, client):
        first = await client.get("/")
        second = await client.get("/about")

        assert MODAL in first.text
        assert MODAL not in second.text

    async def test_submit_stops_modal(self, client):
        await client.get("/")

        response = await client.post("/lead-capture", data={"name": "Sam Lee", "email": "sam@example.com"})

        assert response.status_code == 303
        assert response.headers["location"] == "/?thanks=1"
        assert len(app.state.inquiries.list_inquiries()) == 1
        follow = await client.get("/")
        assert MODAL not in follow.text

    async def test_invalid_submission_keeps_modal_open(self, client):
        response = await client.post("/lead-capture", data={"name": "Sam", "email": "nope"})

        assert response.status_code == 400
        assert MODAL in response.text
        assert "valid email address" in response.text

    async def test_skip_returns_to_page(self, client):
        response = await client.post("/lead-capture/skip", data={"next": "/about"})

        assert response.status_code == 303
        assert response.headers["location"] == "/about"
        assert MODAL not in (await client.get("/")).text

    async def test_dismiss_ignores_offsite_next(self, client):
        response = await client.post("/lead-capture/dismiss", data={"next": "//evil.example"})
        assert response.headers["location"] == "/"


class TestContact:

    async def test_validation_errors(self, client):
        response = await client.post("/contact", data={"email": "jane@acme.com"})

        assert response.status_code == 400
        assert "Name is required" in response.text
        assert "Subject is required" in response.text

    async def test_relay_success(self, client):
        app.state.email_relay = EmailRelay(
            service_id="s",
            template_id="t",
            public_key="k",
            api_url="https://api.emailjs.test/send",
        )
        data = {"name": "Jane", "email": "jane@acme.com", "subject": "Bulk order", "message": "Hello"}

        with patch("pvcpro.notifications.email.requests.post", return_value=MagicMock(status_code=200)):
            response = await client.post("/contact", data=data)

        assert response.status_code == 200
        assert "Message Sent!" in response.text

    async def test_relay_failure(self, client):
        app.state.email_relay = EmailRelay(service_id="", template_id="", public_key="", api_url="")
        data = {"name": "Jane", "email": "jane@acme.com", "subject": "Bulk order", "message": "Hello"}

        response = await client.post("/contact", data=data)

        assert response.status_code == 502
        assert "Failed to send" in response.text


class TestAdmin:

    @pytest.mark.parametrize("path", ["/admin/products", "/admin/categories", "/admin/quotations",
                                      "/admin/inquiries", "/admin/dashboard"])
    async def test_requires_login(self, client, path):
        response = await client.get(path)

        assert response.status_code == 307
        assert response.headers["location"] == "/admin/login"

    async def test_wrong_password(self, client, fake_redis):
        response = await client.post("/admin/login", data={"password": "guess"})

        assert response.status_code == 401
        assert "Invalid password" in response.text
        assert fake_redis.data == {}

    async def test_logout_ends_session(self, admin_client, fake_redis):
        await admin_client.get("/admin/logout")

        assert fake_redis.data == {}
        assert (await admin_client.get("/admin/products")).status_code == 307

    async def test_create_product(self, admin_client, valve_fields):
        valve_fields["name"] = "Gate Valve"

        response = await admin_client.post("/admin/products", data=valve_fields)

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/products?saved=added"
        assert "Gate Valve" in [p.name for p in app.state.catalog.products]

    async def test_create_product_missing_fields(self, admin_client):
        response = await admin_client.post("/admin/products", data={"name": "Gate Valve"})

        assert response.status_code == 400
        assert "Please fill in all required fields." in response.text

    async def test_form_error_not_shown_on_next_visit(self, admin_client):
        failed = await admin_client.post("/admin/products", data={"name": ""})
        assert failed.status_code == 400

        response = await admin_client.get("/admin/products")

        assert response.status_code == 200
        assert "Please fill in all required fields." not in response.text

    async def test_product_list_shows_products_written_elsewhere(self, admin_client, store_client):
        await _insert_elsewhere(store_client, "Gate Valve XL")

        response = await admin_client.get("/admin/products")

        assert "Gate Valve XL" in response.text

    async def test_category_in_use_cannot_be_removed(self, admin_client):
        response = await admin_client.post("/admin/categories/delete", data={"name": "Valves"})

        assert response.status_code == 409
        assert "1 product(s) are using it" in response.text
        assert "Valves" in app.state.catalog.category_names

    async def test_quote_and_reject(self, admin_client, quotation_fields):
        product_id = _product_id("Ball Valve PVC")
        await admin_client.post(f"/catalogue/{product_id}/quotation", data=quotation_fields)
        [quotation] = app.state.quotations.list_quotations()

        response = await admin_client.post(
            f"/admin/quotations/{quotation.id}/quote",
            data={"admin_response": "500 units in stock.", "quoted_price": "$1,250.00"},
        )

        assert response.status_code == 303
        updated = app.state.quotations.get_quotation(quotation.id)
        assert updated.status.value == "quoted"
        assert str(updated.quoted_price) in ("1250", "1250.00")

    async def test_dashboard(self, admin_client):
        response = await admin_client.get("/admin/dashboard")

        assert response.status_code == 200
        assert "Products by Category" in response.text


class TestApi:

    async def test_products_use_ui_field_names(self, client):
        response = await client.get("/api/v1/products", params={"category": "Valves"})

        data = response.json()
        assert data["total"] == 1
        assert data["products"][0]["sizeRange"]
        assert "size_range" not in data["products"][0]

    async def test_unknown_product(self, client):
        response = await client.get("/api/v1/products/missing")
        assert response.status_code == 404

    async def test_categories_with_counts(self, client):
        data = (await client.get("/api/v1/categories")).json()

        counts = {c["name"]: c["products"] for c in data["categories"]}
        assert counts["Valves"] == 1

    async def test_health(self, client):
        assert (await client.get("/api/v1/health")).json()["status"] == "ok"

    async def test_products_written_elsewhere(self, client, store_client):
        await client.get("/api/v1/products")
        await _insert_elsewhere(store_client, "Gate Valve XL")

        data = (await client.get("/api/v1/products", params={"search": "Gate Valve XL"})).json()

        assert data["total"] == 1
        assert data["products"][0]["name"] == "Gate Valve XL"

    async def test_health_ignores_form_errors(self, admin_client):
        await admin_client.post("/admin/products", data={"name": ""})

        assert (await admin_client.get("/api/v1/health")).json()["status"] == "ok"

    async def test_health_degraded_when_store_unreachable(self, client, store_client):
        with patch.object(store_client, "select", AsyncMock(side_effect=StoreError("connection refused"))):
            response = await client.get("/api/v1/health")

        assert response.json()["status"] == "degraded"
