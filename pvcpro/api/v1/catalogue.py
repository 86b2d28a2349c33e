"""Catalogue API: read-only JSON for products and categories."""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from pvcpro.admin.dependencies import get_catalog
from pvcpro.catalog.search import filter_products
from pvcpro.repositories.catalog import CatalogStore

logger = structlog.get_logger()

router = APIRouter(prefix="/api/v1", tags=["catalogue"])


@router.get("/products")
async def list_products(
    category: Optional[str] = Query(None, description="Exact category name, or 'all'"),
    search: Optional[str] = Query(None, description="Case-insensitive name/description match"),
    catalog: CatalogStore = Depends(get_catalog),
) -> dict:
    """List products, newest first, under their UI field names.

    Returns:
        {"products": [...], "total": int}
    """
    await catalog.refresh()
    products = filter_products(catalog.list_products(), category=category, search=search)
    return {
        "products": [p.model_dump(by_alias=True, mode="json") for p in products],
        "total": len(products),
    }


@router.get("/products/{product_id}")
async def get_product(
    product_id: str,
    catalog: CatalogStore = Depends(get_catalog),
) -> dict:
    await catalog.refresh()
    product = catalog.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product.model_dump(by_alias=True, mode="json")


@router.get("/categories")
async def list_categories(catalog: CatalogStore = Depends(get_catalog)) -> dict:
    await catalog.refresh()
    return {
        "categories": [
            {
                "id": c.id,
                "name": c.name,
                "description": c.description,
                "products": catalog.count_in_category(c.name),
            }
            for c in catalog.categories
        ],
    }


@router.get("/health")
async def health_check(catalog: CatalogStore = Depends(get_catalog)) -> dict:
    """Health check endpoint: degraded when the store cannot be read."""
    reachable = await catalog.refresh()
    return {
        "status": "ok" if reachable else "degraded",
        "version": "0.1.0",
        "products": len(catalog.list_products()),
    }
