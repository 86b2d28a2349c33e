"""Generic table client for the remote store.

The client knows tables only by name and rows only as plain dicts keyed by
column name. Every driver or constraint failure surfaces as ``StoreError``
with the driver's message, so callers can show it verbatim.
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pvcpro.models import Base
from pvcpro.models.base import utcnow

logger = structlog.get_logger()


class StoreError(Exception):
    """Transport or constraint failure reported by the store."""


class StoreClient:
    """Select / insert / update / delete against named tables."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    def _table(self, name: str) -> Table:
        try:
            return Base.metadata.tables[name]
        except KeyError:
            raise StoreError(f"Unknown table: {name}") from None

    async def select(
        self,
        table: str,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """Fetch every row of ``table``, optionally ordered by one column."""
        tbl = self._table(table)
        stmt = select(tbl)
        if order_by:
            column = tbl.c[order_by]
            stmt = stmt.order_by(column.desc() if descending else column.asc())

        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            logger.error("store_select_failed", table=table, error=str(e))
            raise StoreError(str(e)) from e

    async def insert(self, table: str, values: dict[str, Any]) -> dict[str, Any]:
        """Insert one row and return it as stored (id and timestamps filled)."""
        tbl = self._table(table)
        stmt = insert(tbl).values(**values).returning(*tbl.c)

        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                row = dict(result.mappings().one())
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("store_insert_failed", table=table, error=str(e))
            raise StoreError(str(e)) from e

        return row

    async def update(
        self,
        table: str,
        row_id: str,
        values: dict[str, Any],
        label: str = "Row",
    ) -> None:
        """Update the row with ``id == row_id``.

        A missing row is an error reported as ``"<label> <id> not found"``.
        """
        tbl = self._table(table)
        if "updated_at" in tbl.c:
            values = {**values, "updated_at": utcnow()}
        stmt = update(tbl).where(tbl.c.id == row_id).values(**values)

        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("store_update_failed", table=table, id=row_id, error=str(e))
            raise StoreError(str(e)) from e

        if result.rowcount == 0:
            raise StoreError(f"{label} {row_id} not found")

    async def delete(self, table: str, column: str, value: Any) -> int:
        """Delete rows where ``column == value``. Returns the deleted count."""
        tbl = self._table(table)
        stmt = delete(tbl).where(tbl.c[column] == value)

        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("store_delete_failed", table=table, column=column, error=str(e))
            raise StoreError(str(e)) from e

        return result.rowcount
