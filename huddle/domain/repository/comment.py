"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from huddle.domain.model.comment import Comment
from huddle.domain.value import CommentId, TargetId, UserId
from huddle.domain.value.common import ValueObject


class CommentFilter(ValueObject):
    """Equality filter for comments.

    Filtering on target gives one level of replies; filtering on root gives
    the whole thread.
    """

    author: Optional[UserId] = None
    target: Optional[TargetId] = None
    root: Optional[TargetId] = None


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many(self, query: CommentFilter) -> list[Comment]:
        """Find comments matching a filter, most recently updated first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        pass

    @abstractmethod
    async def update_fields(
        self, comment_id: CommentId, fields: dict[str, Any]
    ) -> Optional[Comment]:
        """Merge fields into a comment and bump updated_at.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete, no cascade).

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def delete_many(self, query: CommentFilter) -> int:
        """Delete every comment matching a filter in one pass.

        Returns:
            Number of comments deleted
        """
        pass
