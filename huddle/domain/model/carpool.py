"""Carpool entity.

A carpool serves a target entity (usually an activity) and is joined
freely. The driver is always one of its members.
"""

from datetime import datetime

from pydantic import Field

from huddle.domain.model.common import NAME_MAX_LENGTH, DomainModel
from huddle.domain.value import CarpoolId, CarpoolOptions, CarpoolRole, TargetId, UserId


class Carpool(DomainModel):
    """Carpool entity."""

    id: CarpoolId
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    target: TargetId  # Weak reference, not validated here
    driver: UserId
    members: list[UserId] = Field(default_factory=list)
    options: CarpoolOptions = Field(default_factory=CarpoolOptions)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def role_of(self, user_id: UserId) -> CarpoolRole:
        if user_id == self.driver:
            return CarpoolRole.DRIVER
        if user_id in self.members:
            return CarpoolRole.MEMBER
        return CarpoolRole.NONE
