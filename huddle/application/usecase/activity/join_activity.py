"""Join activity use case."""

from uuid import UUID

from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.error import InvalidJoinCodeError, NotFoundError
from huddle.domain.service import ActivityService
from huddle.domain.value import UserId


class JoinActivityRequest(BaseModel):
    """Join activity request, addressed by activity name."""

    user_id: str
    name: str
    join_code: str


class JoinActivityResponse(BaseModel):
    """Join activity response."""

    message: str
    activity_id: str
    members: list[str]


class JoinActivityUseCase(BaseUseCase):
    """Use case for joining an activity by name and join code."""

    def __init__(self, activity_service: ActivityService) -> None:
        self.activity_service = activity_service

    async def execute(self, request: JoinActivityRequest) -> JoinActivityResponse:
        """Look the activity up by name and join it.

        An unknown name is reported exactly like a wrong code so that the
        response does not reveal which activities exist.

        Raises:
            InvalidJoinCodeError: If the name or the code is wrong
            AlreadyMemberError: If the user already belongs to the activity
        """
        try:
            activity = await self.activity_service.get_by_name(request.name)
        except NotFoundError as e:
            raise InvalidJoinCodeError(request.name) from e

        try:
            members = await self.activity_service.add_member(
                activity.id, UserId(UUID(request.user_id)), request.join_code
            )
        except InvalidJoinCodeError as e:
            raise InvalidJoinCodeError(request.name) from e
        return JoinActivityResponse(
            message="Joined activity!",
            activity_id=str(activity.id),
            members=[str(m) for m in members],
        )
