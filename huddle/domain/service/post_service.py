"""Post domain service."""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire

from huddle.domain.error import NotFoundError, PostAuthorMismatchError, ValidationError
from huddle.domain.model.common import CONTENT_MAX_LENGTH
from huddle.domain.model.post import Post
from huddle.domain.repository import PostRepository
from huddle.domain.value import PostId, PostOptions, UserId

from .base import Service

_UPDATABLE_FIELDS = frozenset({"content", "options"})


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create(
        self, author_id: UserId, content: str, options: Optional[PostOptions] = None
    ) -> Post:
        """Create a post.

        Raises:
            ValidationError: If content is empty
        """
        with logfire.span("post_service.create", author_id=str(author_id)):
            if not content:
                raise ValidationError("Post content must be non-empty")
            self._check_length("post", content, CONTENT_MAX_LENGTH)

            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                author=author_id,
                content=content,
                options=options or PostOptions(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_by_author(self, author_id: UserId) -> list[Post]:
        return await self.post_repository.find_many(author=author_id)

    async def list_posts(self) -> list[Post]:
        return await self.post_repository.find_many()

    async def is_author(self, post_id: PostId, user_id: UserId) -> bool:
        """Fail unless the user wrote the post.

        Raises:
            NotFoundError: If the post does not exist
            PostAuthorMismatchError: If the user is not the author
        """
        post = await self.get_by_id(post_id)
        if post.author != user_id:
            raise PostAuthorMismatchError(user_id, post_id)
        return True

    async def update(self, post_id: PostId, fields: dict[str, Any]) -> Post:
        """Update the content or options of a post.

        Raises:
            ValidationError: On any other field, or empty content
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.update", post_id=str(post_id)):
            for key in fields:
                if key not in _UPDATABLE_FIELDS:
                    raise ValidationError(f"Cannot update '{key}' field!")

            changes = dict(fields)
            if "content" in changes and not changes["content"]:
                raise ValidationError("Post content must be non-empty")
            if "content" in changes:
                self._check_length("post", changes["content"], CONTENT_MAX_LENGTH)
            if "options" in changes:
                changes["options"] = PostOptions.model_validate(changes["options"])

            updated = await self.post_repository.update_fields(post_id, changes)
            if updated is None:
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post updated", post_id=str(post_id))
            return updated

    async def delete(self, post_id: PostId) -> None:
        """Delete a post. Its comments are the caller's to remove.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.delete", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            if not deleted:
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))
