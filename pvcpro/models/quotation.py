"""Quotation request model."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pvcpro.models.base import Base, TimestampMixin, UUIDMixin


class Quotation(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "quotations"

    # Product reference (denormalized name)
    product_id: Mapped[str] = mapped_column(String(36), nullable=False)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Customer
    customer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    customer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    company: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Requirements
    quantity: Mapped[str] = mapped_column(String(100), nullable=False)
    preferred_size: Mapped[str] = mapped_column(String(100), nullable=False)
    preferred_material: Mapped[str] = mapped_column(String(100), nullable=False)
    additional_requirements: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Processing
    status: Mapped[str] = mapped_column(String(20), default="pending")  # pending|quoted|accepted|rejected
    admin_response: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    quoted_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
