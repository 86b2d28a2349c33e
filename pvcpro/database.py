"""Async SQLAlchemy engine and session factory."""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from pvcpro.config import settings

engine: AsyncEngine = create_async_engine(settings.database_url)

async_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
