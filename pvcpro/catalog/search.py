"""Catalogue filtering for the storefront and the JSON API."""

from __future__ import annotations

from typing import Iterable, Optional

from pvcpro.schemas.product import Product

ALL_CATEGORIES = "all"


def filter_products(
    products: Iterable[Product],
    category: Optional[str] = None,
    search: Optional[str] = None,
) -> list[Product]:
    """Keep products in ``category`` whose name or description contains ``search``.

    ``category`` matches exactly; None, "" and "all" mean any category.
    ``search`` is case-insensitive; empty matches everything.
    """
    term = (search or "").strip().lower()
    result = []
    for product in products:
        if category and category != ALL_CATEGORIES and product.category != category:
            continue
        if term and term not in product.name.lower() and term not in product.description.lower():
            continue
        result.append(product)
    return result
