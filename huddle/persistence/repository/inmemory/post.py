"""In-memory post repository for testing."""

from datetime import datetime
from typing import Any, Optional

from huddle.domain.model.post import Post
from huddle.domain.repository.post import PostRepository
from huddle.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_many(self, author: Optional[UserId] = None) -> list[Post]:
        """Find posts, optionally by author."""
        posts = [
            p for p in self._posts.values() if author is None or p.author == author
        ]
        posts.sort(key=lambda p: p.updated_at, reverse=True)
        return posts

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        self._posts[post.id] = post
        return post

    async def update_fields(
        self, post_id: PostId, fields: dict[str, Any]
    ) -> Optional[Post]:
        """Merge fields into a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updated = Post.model_validate(
            {**post.model_dump(), **fields, "updated_at": datetime.now()}
        )
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None
