"""Catalog repository: products and categories with a cached copy.

The cache is invalidated by full reload: every successful mutation
re-fetches both lists from the store instead of patching them locally.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from pydantic import ValidationError

from pvcpro.schemas.product import Category, Product, ProductIn
from pvcpro.store.client import StoreClient, StoreError

logger = structlog.get_logger()

PRODUCTS_TABLE = "products"
CATEGORIES_TABLE = "categories"

MISSING_FIELDS_ERROR = "Please fill in all required fields."
EMPTY_CATEGORY_ERROR = "Category name cannot be empty."


def category_in_use_message(name: str, count: int) -> str:
    return (
        f'Cannot remove category "{name}" because {count} product(s) are using it. '
        "Please reassign or delete these products first."
    )


class CatalogStore:
    """Products and categories, cached, with loading and error state.

    Mutations return True on success. On failure they return False and
    leave a human-readable message in ``error``; the cache is untouched.
    """

    def __init__(self, client: StoreClient):
        self.client = client
        self.products: list[Product] = []
        self.categories: list[Category] = []
        self.loading = False
        self.error: Optional[str] = None

    @property
    def category_names(self) -> list[str]:
        return [c.name for c in self.categories]

    async def refresh(self) -> bool:
        """Reload products (newest first) and categories (by name).

        A successful reload clears ``error``; a failed one keeps the old lists.
        """
        self.loading = True
        try:
            product_rows = await self.client.select(
                PRODUCTS_TABLE, order_by="created_at", descending=True
            )
            category_rows = await self.client.select(CATEGORIES_TABLE, order_by="name")
        except StoreError as e:
            self.error = str(e)
            logger.error("catalog_refresh_failed", error=self.error)
            return False
        finally:
            self.loading = False

        self.products = [Product.from_row(row) for row in product_rows]
        self.categories = [Category.model_validate(row) for row in category_rows]
        self.error = None
        logger.debug(
            "catalog_refreshed",
            products=len(self.products),
            categories=len(self.categories),
        )
        return True

    def list_products(self) -> list[Product]:
        return self.products

    def get_product(self, product_id: str) -> Optional[Product]:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def count_in_category(self, name: str) -> int:
        return sum(1 for p in self.products if p.category == name)

    def _validate(self, fields: dict[str, Any]) -> Optional[ProductIn]:
        try:
            return ProductIn.from_form(fields)
        except ValidationError as e:
            self.error = MISSING_FIELDS_ERROR
            logger.info("product_validation_failed", errors=e.error_count())
            return None

    async def add_product(self, fields: dict[str, Any]) -> bool:
        """Insert a product from UI-named fields, then reload."""
        self.error = None
        data = self._validate(fields)
        if data is None:
            return False

        try:
            row = await self.client.insert(PRODUCTS_TABLE, data.to_row())
        except StoreError as e:
            self.error = str(e)
            return False

        logger.info("product_created", product_id=row["id"], name=data.name)
        await self.refresh()
        return True

    async def update_product(self, product_id: str, fields: dict[str, Any]) -> bool:
        """Replace a product's fields, then reload."""
        self.error = None
        data = self._validate(fields)
        if data is None:
            return False

        try:
            await self.client.update(PRODUCTS_TABLE, product_id, data.to_row(), label="Product")
        except StoreError as e:
            self.error = str(e)
            return False

        logger.info("product_updated", product_id=product_id)
        await self.refresh()
        return True

    async def remove_product(self, product_id: str) -> bool:
        self.error = None
        try:
            await self.client.delete(PRODUCTS_TABLE, "id", product_id)
        except StoreError as e:
            self.error = str(e)
            return False

        logger.info("product_deleted", product_id=product_id)
        await self.refresh()
        return True

    async def add_category(self, name: str, description: Optional[str] = None) -> bool:
        """Add a category. Duplicates already cached are rejected here;
        anything the cache misses hits the store's unique constraint."""
        self.error = None
        name = (name or "").strip()
        if not name:
            self.error = EMPTY_CATEGORY_ERROR
            return False
        if name in self.category_names:
            self.error = f'Category "{name}" already exists.'
            return False

        try:
            await self.client.insert(
                CATEGORIES_TABLE,
                {"name": name, "description": (description or "").strip() or None},
            )
        except StoreError as e:
            self.error = str(e)
            return False

        logger.info("category_created", name=name)
        await self.refresh()
        return True

    async def remove_category(self, name: str) -> bool:
        """Delete a category unless a product still uses it.

        Re-fetches before counting so the check sees the store's current
        products. Check and delete are still two separate calls.
        """
        self.error = None
        if not await self.refresh():
            return False

        count = self.count_in_category(name)
        if count:
            self.error = category_in_use_message(name, count)
            logger.info("category_remove_blocked", name=name, products=count)
            return False

        try:
            await self.client.delete(CATEGORIES_TABLE, "name", name)
        except StoreError as e:
            self.error = str(e)
            return False

        logger.info("category_deleted", name=name)
        await self.refresh()
        return True

    async def seed(self, products: list[dict[str, Any]], categories: list[dict[str, Any]]) -> None:
        """Insert a default catalogue. Raises StoreError on failure."""
        for category in categories:
            await self.client.insert(CATEGORIES_TABLE, category)
        for product in products:
            await self.client.insert(PRODUCTS_TABLE, ProductIn.model_validate(product).to_row())
        logger.info("catalog_seeded", products=len(products), categories=len(categories))
        await self.refresh()
