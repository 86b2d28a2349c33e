"""Dashboard breakdowns: products per category, quotations per status."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pvcpro.schemas.product import Product
from pvcpro.schemas.quotation import Quotation, QuotationStatus


@dataclass
class Share:
    label: str
    count: int
    percentage: float


def _shares(labels: Iterable[str], counts: dict[str, int], total: int) -> list[Share]:
    return [
        Share(
            label=label,
            count=counts.get(label, 0),
            percentage=(counts.get(label, 0) / total * 100) if total > 0 else 0.0,
        )
        for label in labels
    ]


def category_breakdown(categories: list[str], products: list[Product]) -> list[Share]:
    """One row per category, in the given order. Products whose category
    is not listed are counted in the total but get no row."""
    counts: dict[str, int] = {}
    for product in products:
        counts[product.category] = counts.get(product.category, 0) + 1
    return _shares(categories, counts, len(products))


def status_breakdown(quotations: list[Quotation]) -> list[Share]:
    counts: dict[str, int] = {}
    for quotation in quotations:
        counts[quotation.status.value] = counts.get(quotation.status.value, 0) + 1
    return _shares([s.value for s in QuotationStatus], counts, len(quotations))
