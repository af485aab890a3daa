"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import ColumnElement, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from huddle.domain.model import Comment
from huddle.domain.repository import CommentFilter, CommentRepository
from huddle.domain.value import CommentId
from huddle.persistence.mappers import comment_to_dict, fields_to_values, row_to_comment
from huddle.persistence.tables import comments_table


def _conditions(query: CommentFilter) -> list[ColumnElement[bool]]:
    conditions = []
    if query.author is not None:
        conditions.append(comments_table.c.author == query.author)
    if query.target is not None:
        conditions.append(comments_table.c.target == query.target)
    if query.root is not None:
        conditions.append(comments_table.c.root == query.root)
    return conditions


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_many(self, query: CommentFilter) -> list[Comment]:
        """Find comments matching a filter, most recently updated first."""
        stmt = (
            select(comments_table)
            .where(*_conditions(query))
            .order_by(desc(comments_table.c.updated_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(comment.id) or comment

    async def update_fields(
        self, comment_id: CommentId, fields: dict[str, Any]
    ) -> Optional[Comment]:
        """Merge fields into a comment and bump updated_at."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(**fields_to_values(fields), updated_at=datetime.now())
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_many(self, query: CommentFilter) -> int:
        """Delete every comment matching a filter in one statement."""
        stmt = comments_table.delete().where(*_conditions(query))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
