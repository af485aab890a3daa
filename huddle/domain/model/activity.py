"""Activity aggregate.

Activities are named groups that users join with a shared join code.
Membership is a three-tier hierarchy: creator > managers > members.
"""

from datetime import datetime

from pydantic import Field

from huddle.domain.model.common import NAME_MAX_LENGTH, DomainModel
from huddle.domain.value import (
    ActivityId,
    ActivityOptions,
    ActivityRole,
    CarpoolId,
    UserId,
)


class Activity(DomainModel):
    """Activity as returned to callers.

    Never carries the join code. Invariant: creator in managers, managers
    a subset of members.
    """

    id: ActivityId
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    creator: UserId
    managers: list[UserId] = Field(default_factory=list)
    members: list[UserId] = Field(default_factory=list)
    carpools: list[CarpoolId] = Field(default_factory=list)
    options: ActivityOptions = Field(default_factory=ActivityOptions)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def role_of(self, user_id: UserId) -> ActivityRole:
        """Highest role the user holds in this activity."""
        if user_id == self.creator:
            return ActivityRole.CREATOR
        if user_id in self.managers:
            return ActivityRole.MANAGER
        if user_id in self.members:
            return ActivityRole.MEMBER
        return ActivityRole.NONE


class ActivityRecord(Activity):
    """Activity as stored, including the write-only join code."""

    join_code: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)

    def sanitize(self) -> Activity:
        """Strip the join code."""
        return Activity(**self.model_dump(exclude={"join_code"}))
