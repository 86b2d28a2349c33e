"""SQLAlchemy ORM models."""

from pvcpro.models.base import Base
from pvcpro.models.inquiry import UserInquiry
from pvcpro.models.product import Category, Product
from pvcpro.models.quotation import Quotation

__all__ = [
    "Base",
    "Category",
    "Product",
    "Quotation",
    "UserInquiry",
]
