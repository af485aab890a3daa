"""Delete activity use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import ActivityService, CarpoolService
from huddle.domain.value import ActivityId, TargetId, UserId


class DeleteActivityRequest(BaseModel):
    """Delete activity request."""

    activity_id: str
    acting_user_id: str


class DeleteActivityResponse(BaseModel):
    """Delete activity response."""

    message: str
    activity_id: str
    carpools_deleted: int


class DeleteActivityUseCase(BaseUseCase):
    """Use case for deleting an activity along with its carpools."""

    def __init__(
        self, activity_service: ActivityService, carpool_service: CarpoolService
    ) -> None:
        """Initialize delete activity use case.

        Args:
            activity_service: Activity domain service
            carpool_service: Carpool domain service
        """
        self.activity_service = activity_service
        self.carpool_service = carpool_service

    async def execute(self, request: DeleteActivityRequest) -> DeleteActivityResponse:
        """Execute delete activity flow.

        Steps:
        1. Verify the caller created the activity
        2. Delete every carpool targeting it
        3. Delete the activity itself

        The steps are not transactional across entities; a failure part way
        leaves the earlier deletions in place.

        Raises:
            NotFoundError: If the activity does not exist
            CreatorMismatchError: If the caller is not the creator
        """
        activity_id = ActivityId(UUID(request.activity_id))
        acting_user_id = UserId(UUID(request.acting_user_id))

        with logfire.span("delete_activity", activity_id=str(activity_id)):
            await self.activity_service.is_creator(activity_id, acting_user_id)
            carpools_deleted = await self.carpool_service.delete_by_target(
                TargetId(activity_id)
            )
            await self.activity_service.delete(activity_id, acting_user_id)

        return DeleteActivityResponse(
            message="Activity deleted!",
            activity_id=str(activity_id),
            carpools_deleted=carpools_deleted,
        )
