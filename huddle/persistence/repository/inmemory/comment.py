"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Any, Optional

from huddle.domain.model.comment import Comment
from huddle.domain.repository.comment import CommentFilter, CommentRepository
from huddle.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_many(self, query: CommentFilter) -> list[Comment]:
        """Find comments matching a filter, most recently updated first."""
        comments = [c for c in self._comments.values() if _matches(c, query)]
        comments.sort(key=lambda c: c.updated_at, reverse=True)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_fields(
        self, comment_id: CommentId, fields: dict[str, Any]
    ) -> Optional[Comment]:
        """Merge fields into a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = Comment.model_validate(
            {**comment.model_dump(), **fields, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_many(self, query: CommentFilter) -> int:
        """Delete every comment matching a filter."""
        doomed = [c.id for c in self._comments.values() if _matches(c, query)]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)


def _matches(comment: Comment, query: CommentFilter) -> bool:
    if query.author is not None and comment.author != query.author:
        return False
    if query.target is not None and comment.target != query.target:
        return False
    if query.root is not None and comment.root != query.root:
        return False
    return True
