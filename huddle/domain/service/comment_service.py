"""Comment domain service."""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire

from huddle.domain.error import AuthorMismatchError, NotFoundError, ValidationError
from huddle.domain.model.comment import Comment
from huddle.domain.model.common import CONTENT_MAX_LENGTH
from huddle.domain.repository import CommentFilter, CommentRepository
from huddle.domain.value import CommentId, CommentOptions, TargetId, UserId

from .base import Service

_UPDATABLE_FIELDS = frozenset({"content", "options"})


class CommentService(Service):
    """Domain service for comment operations.

    Comments are addressed by two pointers fixed at creation: `target` (the
    immediate parent) and `root` (the post anchoring the thread).
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create(
        self,
        author_id: UserId,
        content: str,
        target: TargetId,
        root: Optional[TargetId] = None,
        options: Optional[CommentOptions] = None,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        Args:
            author_id: Author user ID
            content: Comment text
            target: Immediate parent (post or comment)
            root: Thread root post; defaults to target for direct replies
            options: Display options

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty
        """
        root = root if root is not None else target
        with logfire.span(
            "comment_service.create",
            author_id=str(author_id),
            target=str(target),
            root=str(root),
        ):
            if not content:
                raise ValidationError("Comment content must be non-empty")
            self._check_length("comment", content, CONTENT_MAX_LENGTH)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                author=author_id,
                content=content,
                target=target,
                root=root,
                options=options or CommentOptions(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                target=str(target),
                root=str(root),
                top_level=saved.is_top_level,
            )
            return saved

    async def is_author(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Fail unless the user wrote the comment.

        Raises:
            NotFoundError: If the comment does not exist
            AuthorMismatchError: If the user is not the author
        """
        comment = await self.get_by_id(comment_id)
        if comment.author != user_id:
            logfire.warn(
                "Comment author mismatch",
                comment_id=str(comment_id),
                user_id=str(user_id),
            )
            raise AuthorMismatchError(user_id, comment_id)
        return True

    async def update(self, comment_id: CommentId, fields: dict[str, Any]) -> Comment:
        """Update the content or options of a comment.

        Author, target and root can never change.

        Raises:
            ValidationError: On any other field, or empty content
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.update",
            comment_id=str(comment_id),
            fields=sorted(fields),
        ):
            for key in fields:
                if key not in _UPDATABLE_FIELDS:
                    raise ValidationError(f"Cannot update '{key}' field!")

            changes = dict(fields)
            if "content" in changes and not changes["content"]:
                raise ValidationError("Comment content must be non-empty")
            if "content" in changes:
                self._check_length("comment", changes["content"], CONTENT_MAX_LENGTH)
            if "options" in changes:
                changes["options"] = CommentOptions.model_validate(changes["options"])

            updated = await self.comment_repository.update_fields(comment_id, changes)
            if updated is None:
                logfire.warn("Comment not found for update", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment updated", comment_id=str(comment_id))
            return updated

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a single comment.

        Replies to it are left in place; their root still finds them.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def delete_by_root(self, root: TargetId) -> int:
        """Delete a whole thread.

        Returns:
            Number of comments deleted
        """
        with logfire.span("comment_service.delete_by_root", root=str(root)):
            count = await self.comment_repository.delete_many(CommentFilter(root=root))
            logfire.info("Thread deleted", root=str(root), count=count)
            return count

    async def delete_by_author(self, author_id: UserId) -> int:
        """Delete every comment a user wrote.

        Returns:
            Number of comments deleted
        """
        with logfire.span(
            "comment_service.delete_by_author", author_id=str(author_id)
        ):
            count = await self.comment_repository.delete_many(
                CommentFilter(author=author_id)
            )
            logfire.info(
                "Author comments deleted", author_id=str(author_id), count=count
            )
            return count

    async def get_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_by_target(self, target: TargetId) -> list[Comment]:
        """Direct replies to a post or comment (one level)."""
        return await self.list_comments(CommentFilter(target=target))

    async def get_by_root(self, root: TargetId) -> list[Comment]:
        """Every comment in a thread, at any depth."""
        return await self.list_comments(CommentFilter(root=root))

    async def get_by_author(self, author_id: UserId) -> list[Comment]:
        return await self.list_comments(CommentFilter(author=author_id))

    async def list_comments(
        self, query: Optional[CommentFilter] = None
    ) -> list[Comment]:
        """List comments, most recently updated first."""
        with logfire.span("comment_service.list_comments"):
            comments = await self.comment_repository.find_many(
                query or CommentFilter()
            )
            logfire.info("Comments listed", count=len(comments))
            return comments
