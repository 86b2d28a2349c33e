"""Quotation request schemas."""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


class QuotationStatus(str, Enum):
    """Quotation lifecycle.

    pending → quoted | rejected by an administrator. ACCEPTED exists in the
    data but no operation sets it.
    """

    PENDING = "pending"
    QUOTED = "quoted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


# Targets an administrator may set
ADMIN_STATUSES = {QuotationStatus.QUOTED, QuotationStatus.REJECTED}


def _optional(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    return v.strip() or None


class QuotationIn(BaseModel):
    """Visitor-submitted quotation form."""

    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    company: Optional[str] = None
    quantity: str
    preferred_size: str
    preferred_material: str
    additional_requirements: Optional[str] = None

    @field_validator(
        "customer_name",
        "customer_email",
        "quantity",
        "preferred_size",
        "preferred_material",
    )
    @classmethod
    def _required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("required")
        return v

    @field_validator("customer_email")
    @classmethod
    def _email(cls, v: str) -> str:
        if not EMAIL_PATTERN.search(v):
            raise ValueError("invalid email")
        return v

    @field_validator("customer_phone", "company", "additional_requirements")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return _optional(v)


class Quotation(BaseModel):
    """Quotation as cached from the store."""

    id: str
    product_id: str
    product_name: str
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    company: Optional[str] = None
    quantity: str
    preferred_size: str
    preferred_material: str
    additional_requirements: Optional[str] = None
    status: QuotationStatus = QuotationStatus.PENDING
    admin_response: Optional[str] = None
    quoted_price: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
