"""Create carpool use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.model import Carpool
from huddle.domain.service import ActivityService, CarpoolService
from huddle.domain.value import ActivityId, CarpoolOptions, TargetId, UserId


class CreateCarpoolRequest(BaseModel):
    """Create carpool request."""

    driver_id: str
    name: str
    activity_id: str  # Target activity
    options: CarpoolOptions | None = None


class CreateCarpoolResponse(BaseModel):
    """Create carpool response."""

    message: str
    carpool: Carpool


class CreateCarpoolUseCase(BaseUseCase):
    """Use case for offering a carpool to an activity."""

    def __init__(
        self, activity_service: ActivityService, carpool_service: CarpoolService
    ) -> None:
        """Initialize create carpool use case.

        Args:
            activity_service: Activity domain service
            carpool_service: Carpool domain service
        """
        self.activity_service = activity_service
        self.carpool_service = carpool_service

    async def execute(self, request: CreateCarpoolRequest) -> CreateCarpoolResponse:
        """Execute create carpool flow.

        Steps:
        1. Verify the driver belongs to the target activity
        2. Create the carpool
        3. Record the carpool on the activity

        Raises:
            NotFoundError: If the activity does not exist
            MemberMismatchError: If the driver is not an activity member
            ConflictError: If the carpool name is taken
        """
        activity_id = ActivityId(UUID(request.activity_id))
        driver_id = UserId(UUID(request.driver_id))

        with logfire.span("create_carpool", activity_id=str(activity_id)):
            await self.activity_service.is_member(activity_id, driver_id)
            carpool = await self.carpool_service.create(
                driver_id=driver_id,
                name=request.name,
                target=TargetId(activity_id),
                options=request.options,
            )
            await self.activity_service.attach_carpool(activity_id, carpool.id)

        return CreateCarpoolResponse(
            message="Carpool successfully created!", carpool=carpool
        )
