"""Seed database with the default catalogue (categories and sample products)."""

import asyncio

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from pvcpro.catalog.defaults import DEFAULT_CATEGORIES, DEFAULT_PRODUCTS
from pvcpro.config import settings
from pvcpro.models import Base
from pvcpro.repositories.catalog import CatalogStore
from pvcpro.store.client import StoreClient


async def seed():
    """Seed the database unless it already holds a catalogue."""
    engine = create_async_engine(settings.database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    catalog = CatalogStore(StoreClient(session_factory))

    await catalog.refresh()
    if catalog.products or catalog.categories:
        print(f"Catalogue already has {len(catalog.products)} products, skipping.")
    else:
        await catalog.seed(DEFAULT_PRODUCTS, DEFAULT_CATEGORIES)
        for category in catalog.categories:
            print(f"  + Category: {category.name}")
        for product in catalog.products:
            print(f"  + Product: {product.name}")
        print("\nSeed completed!")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
