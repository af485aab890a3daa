"""Activity domain service."""

import hmac
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire

from huddle.domain.error import (
    AlreadyMemberError,
    AuthorizationError,
    ConflictError,
    CreatorMismatchError,
    CreatorProtectedError,
    InvalidJoinCodeError,
    ManagerMismatchError,
    MemberMismatchError,
    NotFoundError,
    ValidationError,
)
from huddle.domain.model.activity import Activity, ActivityRecord
from huddle.domain.model.common import NAME_MAX_LENGTH
from huddle.domain.repository import ActivityFilter, ActivityRepository
from huddle.domain.value import (
    ActivityId,
    ActivityOptions,
    ActivityRole,
    CarpoolId,
    UserId,
)

from .base import Service

# Guard error raised when a user falls short of the required role
_ROLE_ERRORS: dict[ActivityRole, type[AuthorizationError]] = {
    ActivityRole.CREATOR: CreatorMismatchError,
    ActivityRole.MANAGER: ManagerMismatchError,
    ActivityRole.MEMBER: MemberMismatchError,
}

_UPDATABLE_FIELDS = frozenset({"name", "join_code", "options"})


class ActivityService(Service):
    """Domain service for activities and their role hierarchy.

    Every read path returns sanitized `Activity` models; the join code only
    leaves this service inside the record returned by `create`.
    """

    def __init__(self, activity_repository: ActivityRepository) -> None:
        """Initialize activity service.

        Args:
            activity_repository: Activity repository
        """
        self.activity_repository = activity_repository

    async def create(
        self,
        creator_id: UserId,
        name: str,
        join_code: str,
        options: Optional[ActivityOptions] = None,
    ) -> ActivityRecord:
        """Create an activity owned by its creator.

        The creator becomes the sole manager and sole member.

        Args:
            creator_id: Creating user
            name: Unique, non-empty activity name
            join_code: Shared secret other users must supply to join
            options: Optional extension record

        Returns:
            The stored activity, join code included

        Raises:
            ValidationError: If name or join code is empty
            ConflictError: If the name is already taken
        """
        with logfire.span(
            "activity_service.create", creator_id=str(creator_id), name=name
        ):
            await self._ensure_name_available(name)
            if not join_code:
                raise ValidationError("The activity must have a non-empty join code")
            self._check_length("join code", join_code, NAME_MAX_LENGTH)

            now = datetime.now()
            record = ActivityRecord(
                id=ActivityId(uuid4()),
                name=name,
                creator=creator_id,
                managers=[creator_id],
                members=[creator_id],
                carpools=[],
                join_code=join_code,
                options=options or ActivityOptions(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.activity_repository.save(record)
            logfire.info(
                "Activity created",
                activity_id=str(saved.id),
                creator_id=str(creator_id),
                name=name,
            )
            return saved

    async def verify_join_code(
        self, activity_id: ActivityId, join_code: str
    ) -> Activity:
        """Check a supplied join code against the stored one.

        Raises:
            InvalidJoinCodeError: If the code is wrong or the activity does not
                exist; both cases are reported identically
        """
        with logfire.span(
            "activity_service.verify_join_code", activity_id=str(activity_id)
        ):
            record = await self.activity_repository.find_by_id(activity_id)
            if record is None or not hmac.compare_digest(
                record.join_code.encode(), join_code.encode()
            ):
                logfire.warn("Join code rejected", activity_id=str(activity_id))
                raise InvalidJoinCodeError(activity_id)
            return record.sanitize()

    async def add_member(
        self, activity_id: ActivityId, user_id: UserId, join_code: str
    ) -> list[UserId]:
        """Add a user to an activity through its join code.

        Returns:
            The activity's members after the join

        Raises:
            InvalidJoinCodeError: If the code does not match
            AlreadyMemberError: If the user is already a member
        """
        with logfire.span(
            "activity_service.add_member",
            activity_id=str(activity_id),
            user_id=str(user_id),
        ):
            await self.verify_join_code(activity_id, join_code)
            added = await self.activity_repository.add_member(activity_id, user_id)
            if not added:
                logfire.warn(
                    "User already in activity",
                    activity_id=str(activity_id),
                    user_id=str(user_id),
                )
                raise AlreadyMemberError(user_id, "activity", activity_id)

            activity = await self.get_by_id(activity_id)
            logfire.info(
                "Member added to activity",
                activity_id=str(activity_id),
                user_id=str(user_id),
                member_count=len(activity.members),
            )
            return activity.members

    async def promote(
        self, activity_id: ActivityId, acting_user_id: UserId, target_user_id: UserId
    ) -> list[UserId]:
        """Promote a member to manager.

        Promoting someone who is already a manager changes nothing.

        Returns:
            The activity's managers after the promotion

        Raises:
            ManagerMismatchError: If the acting user is not a manager
            NotFoundError: If the target is not a member
        """
        with logfire.span(
            "activity_service.promote",
            activity_id=str(activity_id),
            acting_user_id=str(acting_user_id),
            target_user_id=str(target_user_id),
        ):
            activity = await self.require_role(
                activity_id, acting_user_id, ActivityRole.MANAGER
            )
            if activity.role_of(target_user_id) < ActivityRole.MEMBER:
                raise NotFoundError("Activity member", str(target_user_id))

            added = await self.activity_repository.add_manager(
                activity_id, target_user_id
            )
            activity = await self.get_by_id(activity_id)
            if added:
                logfire.info(
                    "Member promoted to manager",
                    activity_id=str(activity_id),
                    user_id=str(target_user_id),
                )
            elif target_user_id not in activity.members:
                # Removed between the check and the write
                raise NotFoundError("Activity member", str(target_user_id))
            else:
                logfire.info(
                    "User already a manager",
                    activity_id=str(activity_id),
                    user_id=str(target_user_id),
                )
            return activity.managers

    async def demote(
        self, activity_id: ActivityId, acting_user_id: UserId, target_user_id: UserId
    ) -> Activity:
        """Demote a manager, which also removes them from the activity.

        Raises:
            ManagerMismatchError: If the acting user is not a manager
            CreatorProtectedError: If the target is the creator
            NotFoundError: If the target is not a manager
        """
        with logfire.span(
            "activity_service.demote",
            activity_id=str(activity_id),
            acting_user_id=str(acting_user_id),
            target_user_id=str(target_user_id),
        ):
            activity = await self.require_role(
                activity_id, acting_user_id, ActivityRole.MANAGER
            )
            role = activity.role_of(target_user_id)
            if role == ActivityRole.CREATOR:
                raise CreatorProtectedError(acting_user_id, activity_id)
            if role < ActivityRole.MANAGER:
                raise NotFoundError("Activity manager", str(target_user_id))

            return await self._strip_membership(activity_id, target_user_id)

    async def remove_member(
        self, activity_id: ActivityId, acting_user_id: UserId, target_user_id: UserId
    ) -> Activity:
        """Kick a member (manager or not) out of an activity.

        Raises:
            ManagerMismatchError: If the acting user is not a manager
            CreatorProtectedError: If the target is the creator
            NotFoundError: If the target is not a member
        """
        with logfire.span(
            "activity_service.remove_member",
            activity_id=str(activity_id),
            acting_user_id=str(acting_user_id),
            target_user_id=str(target_user_id),
        ):
            activity = await self.require_role(
                activity_id, acting_user_id, ActivityRole.MANAGER
            )
            role = activity.role_of(target_user_id)
            if role == ActivityRole.CREATOR:
                raise CreatorProtectedError(acting_user_id, activity_id)
            if role < ActivityRole.MEMBER:
                raise NotFoundError("Activity member", str(target_user_id))

            return await self._strip_membership(activity_id, target_user_id)

    async def leave(self, activity_id: ActivityId, user_id: UserId) -> Activity:
        """Remove the calling user from an activity.

        Raises:
            MemberMismatchError: If the user is not a member
            CreatorProtectedError: If the user is the creator
        """
        with logfire.span(
            "activity_service.leave",
            activity_id=str(activity_id),
            user_id=str(user_id),
        ):
            activity = await self.require_role(
                activity_id, user_id, ActivityRole.MEMBER
            )
            if activity.role_of(user_id) == ActivityRole.CREATOR:
                raise CreatorProtectedError(user_id, activity_id)

            return await self._strip_membership(activity_id, user_id)

    async def require_role(
        self, activity_id: ActivityId, user_id: UserId, minimum: ActivityRole
    ) -> Activity:
        """Fail unless the user holds at least the given role.

        Returns:
            The activity the check ran against

        Raises:
            NotFoundError: If the activity does not exist
            CreatorMismatchError, ManagerMismatchError, MemberMismatchError:
                Matching the required role
        """
        activity = await self.get_by_id(activity_id)
        if activity.role_of(user_id) < minimum:
            logfire.warn(
                "Activity role check failed",
                activity_id=str(activity_id),
                user_id=str(user_id),
                required=minimum.name,
            )
            raise _ROLE_ERRORS[minimum](user_id, activity_id)
        return activity

    async def is_creator(self, activity_id: ActivityId, user_id: UserId) -> bool:
        await self.require_role(activity_id, user_id, ActivityRole.CREATOR)
        return True

    async def is_manager(self, activity_id: ActivityId, user_id: UserId) -> bool:
        await self.require_role(activity_id, user_id, ActivityRole.MANAGER)
        return True

    async def is_member(self, activity_id: ActivityId, user_id: UserId) -> bool:
        await self.require_role(activity_id, user_id, ActivityRole.MEMBER)
        return True

    async def update(
        self, activity_id: ActivityId, acting_user_id: UserId, fields: dict[str, Any]
    ) -> Activity:
        """Update name, join code or options.

        Raises:
            ManagerMismatchError: If the acting user is not a manager
            ValidationError: On any other field, an empty name or empty code
            ConflictError: If the new name is taken
        """
        with logfire.span(
            "activity_service.update",
            activity_id=str(activity_id),
            acting_user_id=str(acting_user_id),
            fields=sorted(fields),
        ):
            activity = await self.require_role(
                activity_id, acting_user_id, ActivityRole.MANAGER
            )
            self._sanitize_update(fields)

            changes = dict(fields)
            if "name" in changes and changes["name"] != activity.name:
                await self._ensure_name_available(changes["name"])
            if "join_code" in changes and not changes["join_code"]:
                raise ValidationError("The activity must have a non-empty join code")
            if "join_code" in changes:
                self._check_length("join code", changes["join_code"], NAME_MAX_LENGTH)
            if "options" in changes:
                changes["options"] = ActivityOptions.model_validate(changes["options"])

            updated = await self.activity_repository.update_fields(
                activity_id, changes
            )
            if updated is None:
                raise NotFoundError("Activity", str(activity_id))
            logfire.info(
                "Activity updated",
                activity_id=str(activity_id),
                fields=sorted(changes),
            )
            return updated.sanitize()

    async def attach_carpool(
        self, activity_id: ActivityId, carpool_id: CarpoolId
    ) -> bool:
        """Record a carpool as serving this activity."""
        with logfire.span(
            "activity_service.attach_carpool",
            activity_id=str(activity_id),
            carpool_id=str(carpool_id),
        ):
            return await self.activity_repository.add_carpool(activity_id, carpool_id)

    async def detach_carpool(
        self, activity_id: ActivityId, carpool_id: CarpoolId
    ) -> bool:
        """Forget a carpool; a missing activity is not an error."""
        with logfire.span(
            "activity_service.detach_carpool",
            activity_id=str(activity_id),
            carpool_id=str(carpool_id),
        ):
            return await self.activity_repository.remove_carpool(
                activity_id, carpool_id
            )

    async def delete(self, activity_id: ActivityId, acting_user_id: UserId) -> None:
        """Delete an activity.

        Carpools and comments referring to it are left for the caller.

        Raises:
            CreatorMismatchError: If the acting user is not the creator
        """
        with logfire.span(
            "activity_service.delete",
            activity_id=str(activity_id),
            acting_user_id=str(acting_user_id),
        ):
            await self.require_role(activity_id, acting_user_id, ActivityRole.CREATOR)
            await self.activity_repository.delete(activity_id)
            logfire.info("Activity deleted", activity_id=str(activity_id))

    async def get_by_id(self, activity_id: ActivityId) -> Activity:
        """Get an activity by ID.

        Raises:
            NotFoundError: If the activity does not exist
        """
        record = await self.activity_repository.find_by_id(activity_id)
        if record is None:
            raise NotFoundError("Activity", str(activity_id))
        return record.sanitize()

    async def get_by_name(self, name: str) -> Activity:
        """Get an activity by name.

        Raises:
            NotFoundError: If no activity has that name
        """
        with logfire.span("activity_service.get_by_name", name=name):
            record = await self.activity_repository.find_by_name(name)
            if record is None:
                logfire.warn("Activity not found", name=name)
                raise NotFoundError("Activity", name)
            return record.sanitize()

    async def get_by_creator(self, creator_id: UserId) -> list[Activity]:
        return await self.list_activities(ActivityFilter(creator=creator_id))

    async def get_by_member(self, user_id: UserId) -> list[Activity]:
        return await self.list_activities(ActivityFilter(member=user_id))

    async def list_activities(
        self, query: Optional[ActivityFilter] = None
    ) -> list[Activity]:
        """List activities, most recently updated first."""
        with logfire.span("activity_service.list_activities"):
            records = await self.activity_repository.find_many(
                query or ActivityFilter()
            )
            logfire.info("Activities listed", count=len(records))
            return [record.sanitize() for record in records]

    async def _strip_membership(
        self, activity_id: ActivityId, user_id: UserId
    ) -> Activity:
        # Managers first so managers stay a subset of members in between
        await self.activity_repository.remove_manager(activity_id, user_id)
        await self.activity_repository.remove_member(activity_id, user_id)
        logfire.info(
            "User removed from activity",
            activity_id=str(activity_id),
            user_id=str(user_id),
        )
        return await self.get_by_id(activity_id)

    @staticmethod
    def _sanitize_update(fields: dict[str, Any]) -> None:
        for key in fields:
            if key not in _UPDATABLE_FIELDS:
                raise ValidationError(f"Cannot update '{key}' field!")

    async def _ensure_name_available(self, name: str) -> None:
        if not name:
            raise ValidationError(
                "The activity must be named something (it must be non-empty)!"
            )
        self._check_length("activity name", name, NAME_MAX_LENGTH)
        if await self.activity_repository.find_by_name(name):
            logfire.warn("Activity name taken", name=name)
            raise ConflictError(f"Activity with the name '{name}' already exists!")
