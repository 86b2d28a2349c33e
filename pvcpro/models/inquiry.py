"""User inquiry model: stores lead-capture modal submissions."""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pvcpro.models.base import Base, CreatedAtMixin, UUIDMixin


class UserInquiry(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "user_inquiries"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
