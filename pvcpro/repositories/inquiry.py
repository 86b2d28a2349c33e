"""Inquiry repository: lead-capture submissions. Write-once records."""

from __future__ import annotations

from typing import Any, Optional

import structlog
from pydantic import ValidationError

from pvcpro.schemas.inquiry import InquiryIn, UserInquiry
from pvcpro.store.client import StoreClient, StoreError

logger = structlog.get_logger()

INQUIRIES_TABLE = "user_inquiries"


class InquiryStore:
    def __init__(self, client: StoreClient):
        self.client = client
        self.inquiries: list[UserInquiry] = []
        self.error: Optional[str] = None

    async def refresh(self) -> bool:
        try:
            rows = await self.client.select(
                INQUIRIES_TABLE, order_by="created_at", descending=True
            )
        except StoreError as e:
            self.error = str(e)
            logger.error("inquiries_refresh_failed", error=self.error)
            return False

        self.inquiries = [UserInquiry.model_validate(row) for row in rows]
        self.error = None
        return True

    def list_inquiries(self) -> list[UserInquiry]:
        return self.inquiries

    async def create_inquiry(self, fields: dict[str, Any]) -> bool:
        self.error = None
        try:
            data = InquiryIn.model_validate(fields)
        except ValidationError:
            self.error = "Please enter your name and a valid email address."
            return False

        try:
            row = await self.client.insert(INQUIRIES_TABLE, data.model_dump())
        except StoreError as e:
            self.error = str(e)
            return False

        logger.info("inquiry_created", inquiry_id=row["id"], email=data.email)
        await self.refresh()
        return True
