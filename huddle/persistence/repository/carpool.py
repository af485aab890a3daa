"""PostgreSQL implementation of Carpool repository."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import ColumnElement, desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from huddle.domain.error import ConflictError
from huddle.domain.model import Carpool
from huddle.domain.repository import CarpoolFilter, CarpoolRepository
from huddle.domain.value import CarpoolId, UserId
from huddle.persistence.mappers import carpool_to_dict, fields_to_values, row_to_carpool
from huddle.persistence.repository.arrays import add_to_set, pull_from_set
from huddle.persistence.tables import carpools_table


def _conditions(query: CarpoolFilter) -> list[ColumnElement[bool]]:
    conditions = []
    if query.name is not None:
        conditions.append(carpools_table.c.name == query.name)
    if query.target is not None:
        conditions.append(carpools_table.c.target == query.target)
    if query.driver is not None:
        conditions.append(carpools_table.c.driver == query.driver)
    if query.member is not None:
        conditions.append(carpools_table.c.members.contains([query.member]))
    return conditions


class PostgresCarpoolRepository(CarpoolRepository):
    """PostgreSQL implementation of CarpoolRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, carpool_id: CarpoolId) -> Optional[Carpool]:
        """Find a carpool by ID."""
        stmt = select(carpools_table).where(carpools_table.c.id == carpool_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_carpool(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[Carpool]:
        """Find a carpool by its unique name."""
        stmt = select(carpools_table).where(carpools_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_carpool(row._asdict()) if row else None

    async def find_many(self, query: CarpoolFilter) -> list[Carpool]:
        """Find carpools matching a filter, most recently updated first."""
        stmt = (
            select(carpools_table)
            .where(*_conditions(query))
            .order_by(desc(carpools_table.c.updated_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_carpool(row._asdict()) for row in result.fetchall()]

    async def save(self, carpool: Carpool) -> Carpool:
        """Insert a new carpool."""
        stmt = carpools_table.insert().values(**carpool_to_dict(carpool))
        try:
            # Savepoint keeps the request transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(
                f"Carpool with the name '{carpool.name}' already exists!"
            ) from e

        return await self.find_by_id(carpool.id) or carpool

    async def update_fields(
        self, carpool_id: CarpoolId, fields: dict[str, Any]
    ) -> Optional[Carpool]:
        """Merge fields into a carpool and bump updated_at."""
        stmt = (
            update(carpools_table)
            .where(carpools_table.c.id == carpool_id)
            .values(**fields_to_values(fields), updated_at=datetime.now())
            .returning(*carpools_table.c)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.fetchone()
        except IntegrityError as e:
            raise ConflictError(
                f"Carpool with the name '{fields.get('name')}' already exists!"
            ) from e

        return row_to_carpool(row._asdict()) if row else None

    async def add_member(self, carpool_id: CarpoolId, user_id: UserId) -> bool:
        """Atomically add a user to members."""
        return await add_to_set(
            self.session, carpools_table, carpool_id, "members", user_id
        )

    async def remove_member(self, carpool_id: CarpoolId, user_id: UserId) -> bool:
        """Atomically remove a user from members."""
        return await pull_from_set(
            self.session, carpools_table, carpool_id, "members", user_id
        )

    async def delete(self, carpool_id: CarpoolId) -> bool:
        """Delete a carpool (hard delete)."""
        stmt = carpools_table.delete().where(carpools_table.c.id == carpool_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_many(self, query: CarpoolFilter) -> int:
        """Delete every carpool matching a filter."""
        stmt = carpools_table.delete().where(*_conditions(query))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
