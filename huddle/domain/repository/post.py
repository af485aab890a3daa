"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from huddle.domain.model.post import Post
from huddle.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post entity."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        pass

    @abstractmethod
    async def find_many(self, author: Optional[UserId] = None) -> list[Post]:
        """Find posts, optionally by author, most recently updated first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        pass

    @abstractmethod
    async def update_fields(
        self, post_id: PostId, fields: dict[str, Any]
    ) -> Optional[Post]:
        """Merge fields into a post and bump updated_at."""
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        pass
