"""PostgreSQL implementation of Activity repository."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import desc, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from huddle.domain.error import ConflictError
from huddle.domain.model import ActivityRecord
from huddle.domain.repository import ActivityFilter, ActivityRepository
from huddle.domain.value import ActivityId, CarpoolId, UserId
from huddle.persistence.mappers import (
    activity_to_dict,
    fields_to_values,
    row_to_activity,
)
from huddle.persistence.repository.arrays import add_to_set, pull_from_set
from huddle.persistence.tables import activities_table


class PostgresActivityRepository(ActivityRepository):
    """PostgreSQL implementation of ActivityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, activity_id: ActivityId) -> Optional[ActivityRecord]:
        """Find an activity by ID."""
        stmt = select(activities_table).where(activities_table.c.id == activity_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_activity(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[ActivityRecord]:
        """Find an activity by its unique name."""
        stmt = select(activities_table).where(activities_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_activity(row._asdict()) if row else None

    async def find_many(self, query: ActivityFilter) -> list[ActivityRecord]:
        """Find activities matching a filter, most recently updated first."""
        stmt = select(activities_table)

        if query.name is not None:
            stmt = stmt.where(activities_table.c.name == query.name)
        if query.creator is not None:
            stmt = stmt.where(activities_table.c.creator == query.creator)
        if query.manager is not None:
            stmt = stmt.where(activities_table.c.managers.contains([query.manager]))
        if query.member is not None:
            stmt = stmt.where(activities_table.c.members.contains([query.member]))

        stmt = stmt.order_by(desc(activities_table.c.updated_at))

        result = await self.session.execute(stmt)
        return [row_to_activity(row._asdict()) for row in result.fetchall()]

    async def save(self, activity: ActivityRecord) -> ActivityRecord:
        """Insert a new activity."""
        stmt = activities_table.insert().values(**activity_to_dict(activity))
        try:
            # Savepoint keeps the request transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(
                f"Activity with the name '{activity.name}' already exists!"
            ) from e

        return await self.find_by_id(activity.id) or activity

    async def update_fields(
        self, activity_id: ActivityId, fields: dict[str, Any]
    ) -> Optional[ActivityRecord]:
        """Merge fields into an activity and bump updated_at."""
        stmt = (
            update(activities_table)
            .where(activities_table.c.id == activity_id)
            .values(**fields_to_values(fields), updated_at=datetime.now())
            .returning(*activities_table.c)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.fetchone()
        except IntegrityError as e:
            raise ConflictError(
                f"Activity with the name '{fields.get('name')}' already exists!"
            ) from e

        return row_to_activity(row._asdict()) if row else None

    async def add_member(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Atomically add a user to members."""
        return await add_to_set(
            self.session, activities_table, activity_id, "members", user_id
        )

    async def remove_member(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Atomically remove a user from members."""
        return await pull_from_set(
            self.session, activities_table, activity_id, "members", user_id
        )

    async def add_manager(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Atomically promote a current member to manager."""
        return await add_to_set(
            self.session,
            activities_table,
            activity_id,
            "managers",
            user_id,
            activities_table.c.members.contains([user_id]),
        )

    async def remove_manager(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Atomically remove a user from managers."""
        return await pull_from_set(
            self.session, activities_table, activity_id, "managers", user_id
        )

    async def add_carpool(self, activity_id: ActivityId, carpool_id: CarpoolId) -> bool:
        """Atomically append a carpool id."""
        return await add_to_set(
            self.session, activities_table, activity_id, "carpools", carpool_id
        )

    async def remove_carpool(
        self, activity_id: ActivityId, carpool_id: CarpoolId
    ) -> bool:
        """Atomically drop a carpool id."""
        return await pull_from_set(
            self.session, activities_table, activity_id, "carpools", carpool_id
        )

    async def delete(self, activity_id: ActivityId) -> bool:
        """Delete an activity (hard delete)."""
        stmt = activities_table.delete().where(activities_table.c.id == activity_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
