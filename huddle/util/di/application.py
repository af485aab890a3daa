"""Application layer DI providers."""

from dishka import Scope, provide

from huddle.application.usecase.activity import (
    CreateActivityUseCase,
    DeleteActivityUseCase,
    JoinActivityUseCase,
    PromoteMemberUseCase,
)
from huddle.application.usecase.carpool import (
    CreateCarpoolUseCase,
    DeleteCarpoolUseCase,
    ListActivityCarpoolsUseCase,
)
from huddle.application.usecase.comment import CreateCommentUseCase
from huddle.application.usecase.post import DeletePostUseCase
from huddle.application.usecase.user import DeleteUserContentUseCase
from huddle.domain.service import (
    ActivityService,
    CarpoolService,
    CommentService,
    PostService,
)
from huddle.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Activity use cases
    @provide(scope=Scope.REQUEST)
    def get_create_activity_use_case(
        self, activity_service: ActivityService
    ) -> CreateActivityUseCase:
        """Provide create activity use case."""
        return CreateActivityUseCase(activity_service=activity_service)

    @provide(scope=Scope.REQUEST)
    def get_join_activity_use_case(
        self, activity_service: ActivityService
    ) -> JoinActivityUseCase:
        """Provide join activity use case."""
        return JoinActivityUseCase(activity_service=activity_service)

    @provide(scope=Scope.REQUEST)
    def get_promote_member_use_case(
        self, activity_service: ActivityService
    ) -> PromoteMemberUseCase:
        """Provide promote member use case."""
        return PromoteMemberUseCase(activity_service=activity_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_activity_use_case(
        self, activity_service: ActivityService, carpool_service: CarpoolService
    ) -> DeleteActivityUseCase:
        """Provide delete activity use case."""
        return DeleteActivityUseCase(
            activity_service=activity_service, carpool_service=carpool_service
        )

    # Carpool use cases
    @provide(scope=Scope.REQUEST)
    def get_create_carpool_use_case(
        self, activity_service: ActivityService, carpool_service: CarpoolService
    ) -> CreateCarpoolUseCase:
        """Provide create carpool use case."""
        return CreateCarpoolUseCase(
            activity_service=activity_service, carpool_service=carpool_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_activity_carpools_use_case(
        self, activity_service: ActivityService, carpool_service: CarpoolService
    ) -> ListActivityCarpoolsUseCase:
        """Provide list activity carpools use case."""
        return ListActivityCarpoolsUseCase(
            activity_service=activity_service, carpool_service=carpool_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_carpool_use_case(
        self, activity_service: ActivityService, carpool_service: CarpoolService
    ) -> DeleteCarpoolUseCase:
        """Provide delete carpool use case."""
        return DeleteCarpoolUseCase(
            activity_service=activity_service, carpool_service=carpool_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service, comment_service=comment_service
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_user_content_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> DeleteUserContentUseCase:
        """Provide delete user content use case."""
        return DeleteUserContentUseCase(
            post_service=post_service, comment_service=comment_service
        )
