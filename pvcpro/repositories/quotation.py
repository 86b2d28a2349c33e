"""Quotation repository: visitor requests and admin status changes."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

import structlog
from pydantic import ValidationError

from pvcpro.schemas.product import Product
from pvcpro.schemas.quotation import ADMIN_STATUSES, Quotation, QuotationIn, QuotationStatus
from pvcpro.store.client import StoreClient, StoreError

logger = structlog.get_logger()

QUOTATIONS_TABLE = "quotations"

MISSING_FIELDS_ERROR = "Please fill in all required fields with a valid email address."


class QuotationStore:
    """Manages quotation requests. Same bool + ``error`` contract as CatalogStore."""

    def __init__(self, client: StoreClient):
        self.client = client
        self.quotations: list[Quotation] = []
        self.loading = False
        self.error: Optional[str] = None

    async def refresh(self) -> bool:
        self.loading = True
        try:
            rows = await self.client.select(
                QUOTATIONS_TABLE, order_by="created_at", descending=True
            )
        except StoreError as e:
            self.error = str(e)
            logger.error("quotations_refresh_failed", error=self.error)
            return False
        finally:
            self.loading = False

        self.quotations = [Quotation.model_validate(row) for row in rows]
        self.error = None
        return True

    def list_quotations(self) -> list[Quotation]:
        return self.quotations

    def get_quotation(self, quotation_id: str) -> Optional[Quotation]:
        for quotation in self.quotations:
            if quotation.id == quotation_id:
                return quotation
        return None

    def status_counts(self) -> dict[str, int]:
        counts = {status.value: 0 for status in QuotationStatus}
        for quotation in self.quotations:
            counts[quotation.status.value] += 1
        return counts

    async def create_quotation(
        self,
        product: Product,
        fields: dict[str, Any],
    ) -> Optional[Quotation]:
        """Record a visitor's request for ``product``.

        Status is always pending, whatever ``fields`` contains. Returns the
        stored quotation, or None with ``error`` set.
        """
        self.error = None
        try:
            data = QuotationIn.model_validate(fields)
        except ValidationError:
            self.error = MISSING_FIELDS_ERROR
            return None

        values = data.model_dump()
        values.update(
            product_id=product.id,
            product_name=product.name,
            status=QuotationStatus.PENDING.value,
        )

        try:
            row = await self.client.insert(QUOTATIONS_TABLE, values)
        except StoreError as e:
            self.error = str(e)
            return None

        logger.info(
            "quotation_created",
            quotation_id=row["id"],
            product_id=product.id,
            customer_email=data.customer_email,
        )
        await self.refresh()
        return Quotation.model_validate(row)

    async def set_status(
        self,
        quotation_id: str,
        status: str,
        admin_response: Optional[str] = None,
        quoted_price: Optional[Decimal] = None,
    ) -> bool:
        """Move a quotation to quoted or rejected.

        The current status is not checked, so a rejected quotation can
        later be quoted.
        """
        self.error = None
        try:
            target = QuotationStatus(status)
        except ValueError:
            target = None
        if target not in ADMIN_STATUSES:
            self.error = f"Invalid status: {status}"
            return False

        values: dict[str, Any] = {"status": target.value}
        if admin_response:
            values["admin_response"] = admin_response
        if quoted_price is not None:
            values["quoted_price"] = quoted_price

        try:
            await self.client.update(QUOTATIONS_TABLE, quotation_id, values, label="Quotation")
        except StoreError as e:
            self.error = str(e)
            return False

        logger.info("quotation_status_updated", quotation_id=quotation_id, status=target.value)
        await self.refresh()
        return True
