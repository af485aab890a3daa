"""Create activity use case."""

from uuid import UUID

from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.model import ActivityRecord
from huddle.domain.service import ActivityService
from huddle.domain.value import ActivityOptions, UserId


class CreateActivityRequest(BaseModel):
    """Create activity request."""

    creator_id: str  # User ID from authenticated user
    name: str
    join_code: str
    options: ActivityOptions | None = None


class CreateActivityResponse(BaseModel):
    """Create activity response.

    The only response that echoes the join code back, to its creator.
    """

    message: str
    activity: ActivityRecord


class CreateActivityUseCase(BaseUseCase):
    """Use case for creating an activity."""

    def __init__(self, activity_service: ActivityService) -> None:
        self.activity_service = activity_service

    async def execute(self, request: CreateActivityRequest) -> CreateActivityResponse:
        """Create the activity with the caller as creator, manager and member.

        Raises:
            ValidationError: If name or join code is empty
            ConflictError: If the name is taken
        """
        activity = await self.activity_service.create(
            creator_id=UserId(UUID(request.creator_id)),
            name=request.name,
            join_code=request.join_code,
            options=request.options,
        )
        return CreateActivityResponse(
            message="Activity successfully created!", activity=activity
        )
