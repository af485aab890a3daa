"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from huddle.domain.model import Post
from huddle.domain.repository import PostRepository
from huddle.domain.value import PostId, UserId
from huddle.persistence.mappers import fields_to_values, post_to_dict, row_to_post
from huddle.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_many(self, author: Optional[UserId] = None) -> list[Post]:
        """Find posts, optionally by author, most recently updated first."""
        stmt = select(posts_table)
        if author is not None:
            stmt = stmt.where(posts_table.c.author == author)
        stmt = stmt.order_by(desc(posts_table.c.updated_at))

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        stmt = posts_table.insert().values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(post.id) or post

    async def update_fields(
        self, post_id: PostId, fields: dict[str, Any]
    ) -> Optional[Post]:
        """Merge fields into a post and bump updated_at."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(**fields_to_values(fields), updated_at=datetime.now())
            .returning(*posts_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_post(row._asdict()) if row else None

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
