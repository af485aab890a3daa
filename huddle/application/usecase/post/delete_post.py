"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import CommentService, PostService
from huddle.domain.value import PostId, TargetId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    acting_user_id: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str
    post_id: str
    comments_deleted: int


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post and its whole comment thread."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Steps:
        1. Verify the caller wrote the post
        2. Delete every comment rooted on it, at any depth
        3. Delete the post

        Raises:
            NotFoundError: If the post does not exist
            PostAuthorMismatchError: If the caller is not the author
        """
        post_id = PostId(UUID(request.post_id))

        with logfire.span("delete_post", post_id=str(post_id)):
            await self.post_service.is_author(
                post_id, UserId(UUID(request.acting_user_id))
            )
            comments_deleted = await self.comment_service.delete_by_root(
                TargetId(post_id)
            )
            await self.post_service.delete(post_id)

        return DeletePostResponse(
            message="Post deleted!",
            post_id=str(post_id),
            comments_deleted=comments_deleted,
        )
