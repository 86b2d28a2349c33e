"""Product and Category models: the catalogue."""

from typing import List, Optional

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pvcpro.models.base import Base, CreatedAtMixin, TimestampMixin, UUIDMixin


class Product(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Category name, not a foreign key: dangling references are possible
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    # Technical data
    material: Mapped[str] = mapped_column(String(255), nullable=False)
    size_range: Mapped[str] = mapped_column(String(100), nullable=False)
    pressure_rating: Mapped[str] = mapped_column(String(100), nullable=False)
    temperature_range: Mapped[str] = mapped_column(String(100), nullable=False)

    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    applications: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)
    additional_specs: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True)


class Category(Base, UUIDMixin, CreatedAtMixin):
    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
