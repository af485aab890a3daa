"""Delete user content use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import CommentService, PostService
from huddle.domain.value import TargetId, UserId


class DeleteUserContentRequest(BaseModel):
    """Delete user content request."""

    user_id: str


class DeleteUserContentResponse(BaseModel):
    """Delete user content response."""

    message: str
    posts_deleted: int
    comments_deleted: int


class DeleteUserContentUseCase(BaseUseCase):
    """Use case for removing everything a user has written.

    Runs when an account is deleted: first the user's own comments, then
    each of the user's posts together with every comment in its thread.
    """

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(
        self, request: DeleteUserContentRequest
    ) -> DeleteUserContentResponse:
        user_id = UserId(UUID(request.user_id))

        with logfire.span("delete_user_content", user_id=str(user_id)):
            comments_deleted = await self.comment_service.delete_by_author(user_id)

            posts = await self.post_service.get_by_author(user_id)
            for post in posts:
                comments_deleted += await self.comment_service.delete_by_root(
                    TargetId(post.id)
                )
                await self.post_service.delete(post.id)

            logfire.info(
                "User content deleted",
                user_id=str(user_id),
                posts=len(posts),
                comments=comments_deleted,
            )

        return DeleteUserContentResponse(
            message="User content deleted!",
            posts_deleted=len(posts),
            comments_deleted=comments_deleted,
        )
