"""Activity repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from huddle.domain.model.activity import ActivityRecord
from huddle.domain.value import ActivityId, CarpoolId, UserId
from huddle.domain.value.common import ValueObject


class ActivityFilter(ValueObject):
    """Equality and array-membership filter for activities.

    Unset fields do not constrain the query.
    """

    name: Optional[str] = None
    creator: Optional[UserId] = None
    manager: Optional[UserId] = None
    member: Optional[UserId] = None


class ActivityRepository(ABC):
    """Repository for the Activity aggregate.

    Membership mutations are single atomic set operations in the store so
    that concurrent joins never lose an update or store a duplicate.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, activity_id: ActivityId) -> Optional[ActivityRecord]:
        """Find an activity by ID.

        Args:
            activity_id: The activity's unique identifier

        Returns:
            The stored activity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[ActivityRecord]:
        """Find an activity by its unique name."""
        pass

    @abstractmethod
    async def find_many(self, query: ActivityFilter) -> list[ActivityRecord]:
        """Find activities matching a filter, most recently updated first."""
        pass

    @abstractmethod
    async def save(self, activity: ActivityRecord) -> ActivityRecord:
        """Insert a new activity.

        Raises:
            ConflictError: If the name is already taken
        """
        pass

    @abstractmethod
    async def update_fields(
        self, activity_id: ActivityId, fields: dict[str, Any]
    ) -> Optional[ActivityRecord]:
        """Merge fields into an activity and bump updated_at.

        Returns:
            The updated activity, or None if it does not exist

        Raises:
            ConflictError: If a rename collides with another activity
        """
        pass

    @abstractmethod
    async def add_member(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Atomically add a user to members.

        Returns:
            True if added, False if already a member or activity is missing
        """
        pass

    @abstractmethod
    async def remove_member(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Atomically remove a user from members.

        Returns:
            True if a member was removed
        """
        pass

    @abstractmethod
    async def add_manager(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Atomically add a current member to managers.

        Returns:
            True if added, False if already a manager or not a member
        """
        pass

    @abstractmethod
    async def remove_manager(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Atomically remove a user from managers."""
        pass

    @abstractmethod
    async def add_carpool(self, activity_id: ActivityId, carpool_id: CarpoolId) -> bool:
        """Atomically append a carpool id to the activity's carpools."""
        pass

    @abstractmethod
    async def remove_carpool(
        self, activity_id: ActivityId, carpool_id: CarpoolId
    ) -> bool:
        """Atomically drop a carpool id from the activity's carpools."""
        pass

    @abstractmethod
    async def delete(self, activity_id: ActivityId) -> bool:
        """Delete an activity (hard delete).

        Returns:
            True if a row was deleted
        """
        pass
