"""Delete carpool use case."""

from uuid import UUID

from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import ActivityService, CarpoolService
from huddle.domain.value import ActivityId, CarpoolId, UserId


class DeleteCarpoolRequest(BaseModel):
    """Delete carpool request."""

    carpool_id: str
    acting_user_id: str


class DeleteCarpoolResponse(BaseModel):
    """Delete carpool response."""

    message: str
    carpool_id: str


class DeleteCarpoolUseCase(BaseUseCase):
    """Use case for deleting a carpool and detaching it from its activity."""

    def __init__(
        self, activity_service: ActivityService, carpool_service: CarpoolService
    ) -> None:
        self.activity_service = activity_service
        self.carpool_service = carpool_service

    async def execute(self, request: DeleteCarpoolRequest) -> DeleteCarpoolResponse:
        """Delete the carpool, then drop it from its target's carpool list.

        A target that is not an activity is left untouched.

        Raises:
            NotFoundError: If the carpool does not exist
            CarpoolMemberMismatchError: If the caller is neither driver nor member
        """
        carpool = await self.carpool_service.delete(
            CarpoolId(UUID(request.carpool_id)), UserId(UUID(request.acting_user_id))
        )
        await self.activity_service.detach_carpool(
            ActivityId(carpool.target), carpool.id
        )
        return DeleteCarpoolResponse(
            message="Carpool deleted!", carpool_id=str(carpool.id)
        )
