"""Atomic array-column set operations shared by the PostgreSQL repositories."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, Table, func, literal, update
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.ext.asyncio import AsyncSession


async def add_to_set(
    session: AsyncSession,
    table: Table,
    row_id: UUID,
    column: str,
    value: UUID,
    *conditions: ColumnElement[Any],
) -> bool:
    """Append a value to an array column unless it is already present.

    One UPDATE whose WHERE clause excludes rows already holding the value,
    so two concurrent adds never store a duplicate.

    Returns:
        True if a row was changed
    """
    array = table.c[column]
    stmt = (
        update(table)
        .where(table.c.id == row_id)
        .where(~array.contains([value]))
        .values(
            {
                column: func.array_append(array, literal(value, PG_UUID)),
                "updated_at": datetime.now(),
            }
        )
    )
    for condition in conditions:
        stmt = stmt.where(condition)

    result = await session.execute(stmt)
    await session.flush()
    return result.rowcount > 0


async def pull_from_set(
    session: AsyncSession, table: Table, row_id: UUID, column: str, value: UUID
) -> bool:
    """Remove every occurrence of a value from an array column.

    Returns:
        True if the value was present
    """
    array = table.c[column]
    stmt = (
        update(table)
        .where(table.c.id == row_id)
        .where(array.contains([value]))
        .values(
            {
                column: func.array_remove(array, literal(value, PG_UUID)),
                "updated_at": datetime.now(),
            }
        )
    )
    result = await session.execute(stmt)
    await session.flush()
    return result.rowcount > 0
