"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.error import ValidationError
from huddle.domain.model import Comment
from huddle.domain.service import CommentService, PostService
from huddle.domain.value import CommentId, CommentOptions, PostId, TargetId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    author_id: str  # User ID from authenticated user
    content: str
    post_id: str  # Thread root
    parent_id: str | None = None  # Parent comment ID for replies
    options: CommentOptions | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    message: str
    comment: Comment


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the root post exists
        2. When replying, verify the parent comment exists in the same thread
        3. Create the comment with target = parent (or post) and root = post

        Args:
            request: Create comment request

        Returns:
            Create comment response with the new comment

        Raises:
            NotFoundError: If the post or parent comment does not exist
            ValidationError: If the parent belongs to another thread
        """
        post_id = PostId(UUID(request.post_id))
        root = TargetId(post_id)

        with logfire.span("create_comment", post_id=str(post_id)):
            await self.post_service.get_by_id(post_id)

            target = root
            if request.parent_id:
                parent = await self.comment_service.get_by_id(
                    CommentId(UUID(request.parent_id))
                )
                if parent.root != root:
                    raise ValidationError(
                        "Parent comment belongs to a different thread"
                    )
                target = TargetId(parent.id)

            comment = await self.comment_service.create(
                author_id=UserId(UUID(request.author_id)),
                content=request.content,
                target=target,
                root=root,
                options=request.options,
            )

        return CreateCommentResponse(message="Comment created!", comment=comment)
