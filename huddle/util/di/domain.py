"""Domain layer DI providers."""

from dishka import Scope, provide

from huddle.domain.repository import (
    ActivityRepository,
    CarpoolRepository,
    CommentRepository,
    PostRepository,
)
from huddle.domain.service import (
    ActivityService,
    CarpoolService,
    CommentService,
    PostService,
)
from huddle.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each unit of work gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_activity_service(
        self, activity_repository: ActivityRepository
    ) -> ActivityService:
        """Provide activity domain service."""
        return ActivityService(activity_repository=activity_repository)

    @provide
    def get_carpool_service(
        self, carpool_repository: CarpoolRepository
    ) -> CarpoolService:
        """Provide carpool domain service."""
        return CarpoolService(carpool_repository=carpool_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)
