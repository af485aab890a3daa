"""List activity carpools use case."""

from uuid import UUID

from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.model import Carpool
from huddle.domain.service import ActivityService, CarpoolService
from huddle.domain.value import TargetId, UserId


class ListActivityCarpoolsRequest(BaseModel):
    """List activity carpools request, addressed by activity name."""

    user_id: str
    activity_name: str


class ListActivityCarpoolsResponse(BaseModel):
    """List activity carpools response."""

    activity_id: str
    carpools: list[Carpool]


class ListActivityCarpoolsUseCase(BaseUseCase):
    """Use case for a member browsing the carpools of an activity."""

    def __init__(
        self, activity_service: ActivityService, carpool_service: CarpoolService
    ) -> None:
        self.activity_service = activity_service
        self.carpool_service = carpool_service

    async def execute(
        self, request: ListActivityCarpoolsRequest
    ) -> ListActivityCarpoolsResponse:
        """List carpools serving the named activity, most recently updated first.

        Raises:
            NotFoundError: If no activity has that name
            MemberMismatchError: If the caller is not a member
        """
        activity = await self.activity_service.get_by_name(request.activity_name)
        user_id = UserId(UUID(request.user_id))
        await self.activity_service.is_member(activity.id, user_id)

        carpools = await self.carpool_service.get_by_target(TargetId(activity.id))
        return ListActivityCarpoolsResponse(
            activity_id=str(activity.id), carpools=carpools
        )
