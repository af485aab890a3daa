"""In-memory activity repository for testing."""

from datetime import datetime
from typing import Any, Optional

from huddle.domain.error import ConflictError
from huddle.domain.model.activity import ActivityRecord
from huddle.domain.repository.activity import ActivityFilter, ActivityRepository
from huddle.domain.value import ActivityId, CarpoolId, UserId


class InMemoryActivityRepository(ActivityRepository):
    """In-memory implementation of ActivityRepository for testing."""

    def __init__(self) -> None:
        self._activities: dict[ActivityId, ActivityRecord] = {}

    async def find_by_id(self, activity_id: ActivityId) -> Optional[ActivityRecord]:
        """Find an activity by ID."""
        return self._activities.get(activity_id)

    async def find_by_name(self, name: str) -> Optional[ActivityRecord]:
        """Find an activity by name."""
        return next((a for a in self._activities.values() if a.name == name), None)

    async def find_many(self, query: ActivityFilter) -> list[ActivityRecord]:
        """Find activities matching a filter."""
        activities = [a for a in self._activities.values() if _matches(a, query)]
        activities.sort(key=lambda a: a.updated_at, reverse=True)
        return activities

    async def save(self, activity: ActivityRecord) -> ActivityRecord:
        """Insert a new activity."""
        if any(
            a.name == activity.name and a.id != activity.id
            for a in self._activities.values()
        ):
            raise ConflictError(
                f"Activity with the name '{activity.name}' already exists!"
            )
        self._activities[activity.id] = activity
        return activity

    async def update_fields(
        self, activity_id: ActivityId, fields: dict[str, Any]
    ) -> Optional[ActivityRecord]:
        """Merge fields into an activity."""
        activity = self._activities.get(activity_id)
        if activity is None:
            return None

        name = fields.get("name")
        if name is not None and any(
            a.name == name and a.id != activity_id for a in self._activities.values()
        ):
            raise ConflictError(f"Activity with the name '{name}' already exists!")

        return self._replace(activity, **fields)

    async def add_member(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Add a user to members."""
        activity = self._activities.get(activity_id)
        if activity is None or user_id in activity.members:
            return False
        self._replace(activity, members=[*activity.members, user_id])
        return True

    async def remove_member(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Remove a user from members."""
        activity = self._activities.get(activity_id)
        if activity is None or user_id not in activity.members:
            return False
        self._replace(activity, members=[m for m in activity.members if m != user_id])
        return True

    async def add_manager(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Promote a current member to manager."""
        activity = self._activities.get(activity_id)
        if (
            activity is None
            or user_id not in activity.members
            or user_id in activity.managers
        ):
            return False
        self._replace(activity, managers=[*activity.managers, user_id])
        return True

    async def remove_manager(self, activity_id: ActivityId, user_id: UserId) -> bool:
        """Remove a user from managers."""
        activity = self._activities.get(activity_id)
        if activity is None or user_id not in activity.managers:
            return False
        self._replace(
            activity, managers=[m for m in activity.managers if m != user_id]
        )
        return True

    async def add_carpool(self, activity_id: ActivityId, carpool_id: CarpoolId) -> bool:
        """Append a carpool id."""
        activity = self._activities.get(activity_id)
        if activity is None or carpool_id in activity.carpools:
            return False
        self._replace(activity, carpools=[*activity.carpools, carpool_id])
        return True

    async def remove_carpool(
        self, activity_id: ActivityId, carpool_id: CarpoolId
    ) -> bool:
        """Drop a carpool id."""
        activity = self._activities.get(activity_id)
        if activity is None or carpool_id not in activity.carpools:
            return False
        self._replace(
            activity, carpools=[c for c in activity.carpools if c != carpool_id]
        )
        return True

    async def delete(self, activity_id: ActivityId) -> bool:
        """Delete an activity."""
        return self._activities.pop(activity_id, None) is not None

    def _replace(self, activity: ActivityRecord, **changes: Any) -> ActivityRecord:
        # Round-trip through validation so options dicts become records
        updated = ActivityRecord.model_validate(
            {**activity.model_dump(), **changes, "updated_at": datetime.now()}
        )
        self._activities[activity.id] = updated
        return updated


def _matches(activity: ActivityRecord, query: ActivityFilter) -> bool:
    if query.name is not None and activity.name != query.name:
        return False
    if query.creator is not None and activity.creator != query.creator:
        return False
    if query.manager is not None and query.manager not in activity.managers:
        return False
    if query.member is not None and query.member not in activity.members:
        return False
    return True
