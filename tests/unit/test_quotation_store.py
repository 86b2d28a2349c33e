"""Tests for quotation requests and admin status changes."""

from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from pvcpro.repositories.quotation import MISSING_FIELDS_ERROR
from pvcpro.schemas.quotation import QuotationStatus
from pvcpro.store.client import StoreError


@pytest.fixture
async def product(catalog, valve_fields):
    await catalog.add_product(valve_fields)
    return catalog.products[0]


async def test_quotation_stored_as_pending(quotations, product, quotation_fields):
    quotation_fields["status"] = "quoted"

    quotation = await quotations.create_quotation(product, quotation_fields)

    assert quotation is not None
    assert quotation.status == QuotationStatus.PENDING
    assert quotation.product_id == product.id
    assert quotation.product_name == "Ball Valve PVC"
    assert quotation.customer_name == "Jane Doe"
    assert quotation.customer_email == "jane@acme.com"
    assert quotation.quantity == "500"
    assert quotation.preferred_size == '2"'
    assert quotation.customer_phone is None
    assert quotations.get_quotation(quotation.id) is not None


async def test_invalid_email_rejected(quotations, store_client, product, quotation_fields):
    quotation_fields["customer_email"] = "jane.acme.com"

    assert await quotations.create_quotation(product, quotation_fields) is None
    assert quotations.error == MISSING_FIELDS_ERROR
    assert await store_client.select("quotations") == []


async def test_missing_quantity_rejected(quotations, product, quotation_fields):
    del quotation_fields["quantity"]

    assert await quotations.create_quotation(product, quotation_fields) is None
    assert quotations.error == MISSING_FIELDS_ERROR


async def test_quote_with_response_and_price(quotations, product, quotation_fields):
    quotation = await quotations.create_quotation(product, quotation_fields)

    ok = await quotations.set_status(
        quotation.id,
        "quoted",
        admin_response="We can supply 500 units.",
        quoted_price=Decimal("1250.00"),
    )

    assert ok
    updated = quotations.get_quotation(quotation.id)
    assert updated.status == QuotationStatus.QUOTED
    assert updated.admin_response == "We can supply 500 units."
    assert updated.quoted_price == Decimal("1250")


async def test_rejected_can_be_quoted_later(quotations, product, quotation_fields):
    quotation = await quotations.create_quotation(product, quotation_fields)

    assert await quotations.set_status(quotation.id, "rejected")
    assert quotations.get_quotation(quotation.id).admin_response is None
    assert await quotations.set_status(quotation.id, "quoted", admin_response="Revised offer")
    assert quotations.get_quotation(quotation.id).status == QuotationStatus.QUOTED


@pytest.mark.parametrize("status", ["accepted", "pending", "shipped"])
async def test_invalid_target_status(quotations, product, quotation_fields, status):
    quotation = await quotations.create_quotation(product, quotation_fields)

    assert not await quotations.set_status(quotation.id, status)
    assert quotations.error == f"Invalid status: {status}"
    assert quotations.get_quotation(quotation.id).status == QuotationStatus.PENDING


async def test_set_status_unknown_id(quotations):
    assert not await quotations.set_status("missing", "rejected")
    assert quotations.error == "Quotation missing not found"


async def test_status_counts(quotations, product, quotation_fields):
    first = await quotations.create_quotation(product, quotation_fields)
    await quotations.create_quotation(product, quotation_fields)
    await quotations.set_status(first.id, "rejected")

    assert quotations.status_counts() == {
        "pending": 1,
        "quoted": 0,
        "accepted": 0,
        "rejected": 1,
    }


async def test_create_quotation_store_failure(quotations, store_client, product, quotation_fields):
    await quotations.create_quotation(product, quotation_fields)
    before = list(quotations.quotations)

    with patch.object(store_client, "insert", AsyncMock(side_effect=StoreError("boom"))):
        assert await quotations.create_quotation(product, quotation_fields) is None

    assert quotations.error == "boom"
    assert quotations.quotations == before


async def test_set_status_store_failure(quotations, store_client, product, quotation_fields):
    quotation = await quotations.create_quotation(product, quotation_fields)

    with patch.object(store_client, "update", AsyncMock(side_effect=StoreError("boom"))):
        assert not await quotations.set_status(quotation.id, "rejected")

    assert quotations.error == "boom"
    assert quotations.get_quotation(quotation.id).status == QuotationStatus.PENDING
