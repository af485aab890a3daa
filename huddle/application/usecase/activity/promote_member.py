"""Promote member use case."""

from uuid import UUID

from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import ActivityService
from huddle.domain.value import ActivityId, UserId


class PromoteMemberRequest(BaseModel):
    """Promote member request."""

    activity_id: str
    acting_user_id: str
    target_user_id: str


class PromoteMemberResponse(BaseModel):
    """Promote member response."""

    message: str
    managers: list[str]


class PromoteMemberUseCase(BaseUseCase):
    """Use case for a manager promoting a member to manager."""

    def __init__(self, activity_service: ActivityService) -> None:
        self.activity_service = activity_service

    async def execute(self, request: PromoteMemberRequest) -> PromoteMemberResponse:
        managers = await self.activity_service.promote(
            ActivityId(UUID(request.activity_id)),
            UserId(UUID(request.acting_user_id)),
            UserId(UUID(request.target_user_id)),
        )
        return PromoteMemberResponse(
            message="Member promoted!", managers=[str(m) for m in managers]
        )
