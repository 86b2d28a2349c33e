"""Tests for storefront catalogue filtering and dashboard breakdowns."""

import pytest

from pvcpro.catalog.analytics import category_breakdown, status_breakdown
from pvcpro.catalog.search import filter_products
from pvcpro.schemas.product import Product
from pvcpro.schemas.quotation import Quotation


def _product(name: str, category: str, description: str = "PVC part") -> Product:
    return Product(
        id=name.lower().replace(" ", "-"),
        name=name,
        description=description,
        category=category,
        material="PVC",
        size_range='1" - 2"',
        pressure_rating="150 PSI",
        temperature_range="0°C to 60°C",
    )


@pytest.fixture
def products():
    return [
        _product("Ball Valve PVC", "Valves", "Quarter-turn shut-off"),
        _product("Check Valve", "Valves", "Prevents backflow"),
        _product("Standard PVC Flange", "Flanges", "Bolted connection"),
    ]


class TestFilterProducts:

    def test_no_filters_returns_everything(self, products):
        assert filter_products(products) == products

    @pytest.mark.parametrize("category", [None, "", "all"])
    def test_any_category(self, products, category):
        assert len(filter_products(products, category=category)) == 3

    def test_exact_category(self, products):
        names = [p.name for p in filter_products(products, category="Valves")]
        assert names == ["Ball Valve PVC", "Check Valve"]

    def test_category_is_case_sensitive(self, products):
        assert filter_products(products, category="valves") == []

    def test_search_name_case_insensitive(self, products):
        names = [p.name for p in filter_products(products, search="FLANGE")]
        assert names == ["Standard PVC Flange"]

    def test_search_description(self, products):
        names = [p.name for p in filter_products(products, search="backflow")]
        assert names == ["Check Valve"]

    def test_category_and_search_combined(self, products):
        assert filter_products(products, category="Flanges", search="valve") == []


class TestBreakdowns:

    def test_category_breakdown(self, products):
        shares = category_breakdown(["Flanges", "Valves", "Adapters"], products)

        assert [(s.label, s.count) for s in shares] == [
            ("Flanges", 1),
            ("Valves", 2),
            ("Adapters", 0),
        ]
        assert shares[1].percentage == pytest.approx(66.666, rel=1e-3)

    def test_empty_catalogue(self):
        shares = category_breakdown(["Valves"], [])
        assert shares[0].percentage == 0.0

    def test_status_breakdown(self):
        base = dict(
            product_id="p1",
            product_name="Ball Valve PVC",
            customer_name="Jane Doe",
            customer_email="jane@acme.com",
            quantity="10",
            preferred_size='2"',
            preferred_material="PVC",
        )
        quotations = [
            Quotation(id="q1", status="pending", **base),
            Quotation(id="q2", status="quoted", **base),
            Quotation(id="q3", status="pending", **base),
            Quotation(id="q4", status="rejected", **base),
        ]

        shares = {s.label: s for s in status_breakdown(quotations)}

        assert shares["pending"].count == 2
        assert shares["pending"].percentage == 50.0
        assert shares["accepted"].count == 0
