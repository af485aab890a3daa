"""Carpool domain service."""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire

from huddle.domain.error import (
    AlreadyMemberError,
    CarpoolDriverMismatchError,
    CarpoolMemberMismatchError,
    ConflictError,
    DriverProtectedError,
    NotFoundError,
    ValidationError,
)
from huddle.domain.model.carpool import Carpool
from huddle.domain.model.common import NAME_MAX_LENGTH
from huddle.domain.repository import CarpoolFilter, CarpoolRepository
from huddle.domain.value import (
    CarpoolId,
    CarpoolOptions,
    CarpoolRole,
    TargetId,
    UserId,
)

from .base import Service

_UPDATABLE_FIELDS = frozenset({"name", "options"})


class CarpoolService(Service):
    """Domain service for carpool operations.

    Two roles only (driver, member) and no join code. The target is a weak
    reference; checking it exists is the caller's job.
    """

    def __init__(self, carpool_repository: CarpoolRepository) -> None:
        """Initialize carpool service.

        Args:
            carpool_repository: Carpool repository
        """
        self.carpool_repository = carpool_repository

    async def create(
        self,
        driver_id: UserId,
        name: str,
        target: TargetId,
        options: Optional[CarpoolOptions] = None,
    ) -> Carpool:
        """Create a carpool driven by its creator.

        Args:
            driver_id: Creating user, who becomes driver and first member
            name: Unique, non-empty carpool name
            target: Entity the carpool serves
            options: Optional extension record

        Returns:
            Created carpool

        Raises:
            ValidationError: If the name is empty
            ConflictError: If the name is already taken
        """
        with logfire.span(
            "carpool_service.create",
            driver_id=str(driver_id),
            name=name,
            target=str(target),
        ):
            await self._ensure_name_available(name)

            now = datetime.now()
            carpool = Carpool(
                id=CarpoolId(uuid4()),
                name=name,
                target=target,
                driver=driver_id,
                members=[driver_id],
                options=options or CarpoolOptions(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.carpool_repository.save(carpool)
            logfire.info(
                "Carpool created",
                carpool_id=str(saved.id),
                driver_id=str(driver_id),
                target=str(target),
            )
            return saved

    async def join(self, carpool_id: CarpoolId, user_id: UserId) -> list[UserId]:
        """Add a user to a carpool.

        Returns:
            The carpool's members after the join

        Raises:
            NotFoundError: If the carpool does not exist
            AlreadyMemberError: If the user is already in the carpool
        """
        with logfire.span(
            "carpool_service.join", carpool_id=str(carpool_id), user_id=str(user_id)
        ):
            await self.get_by_id(carpool_id)
            added = await self.carpool_repository.add_member(carpool_id, user_id)
            if not added:
                logfire.warn(
                    "User already in carpool",
                    carpool_id=str(carpool_id),
                    user_id=str(user_id),
                )
                raise AlreadyMemberError(user_id, "carpool", carpool_id)

            carpool = await self.get_by_id(carpool_id)
            logfire.info(
                "User joined carpool",
                carpool_id=str(carpool_id),
                user_id=str(user_id),
                member_count=len(carpool.members),
            )
            return carpool.members

    async def leave(self, carpool_id: CarpoolId, user_id: UserId) -> Carpool:
        """Remove the calling user from a carpool.

        Raises:
            CarpoolMemberMismatchError: If the user is not a member
            DriverProtectedError: If the user is the driver
        """
        with logfire.span(
            "carpool_service.leave", carpool_id=str(carpool_id), user_id=str(user_id)
        ):
            carpool = await self.get_by_id(carpool_id)
            role = carpool.role_of(user_id)
            if role == CarpoolRole.DRIVER:
                raise DriverProtectedError(user_id, carpool_id)
            if role < CarpoolRole.MEMBER:
                raise CarpoolMemberMismatchError(user_id, carpool_id)

            await self.carpool_repository.remove_member(carpool_id, user_id)
            logfire.info(
                "User left carpool", carpool_id=str(carpool_id), user_id=str(user_id)
            )
            return await self.get_by_id(carpool_id)

    async def is_driver(self, carpool_id: CarpoolId, user_id: UserId) -> bool:
        """Fail unless the user drives the carpool.

        Raises:
            NotFoundError: If the carpool does not exist
            CarpoolDriverMismatchError: If the user is not the driver
        """
        carpool = await self.get_by_id(carpool_id)
        if carpool.role_of(user_id) < CarpoolRole.DRIVER:
            raise CarpoolDriverMismatchError(user_id, carpool_id)
        return True

    async def is_member(self, carpool_id: CarpoolId, user_id: UserId) -> bool:
        """Fail unless the user rides in the carpool.

        Raises:
            NotFoundError: If the carpool does not exist
            CarpoolMemberMismatchError: If the user is not a member
        """
        carpool = await self.get_by_id(carpool_id)
        if carpool.role_of(user_id) < CarpoolRole.MEMBER:
            raise CarpoolMemberMismatchError(user_id, carpool_id)
        return True

    async def update(
        self, carpool_id: CarpoolId, acting_user_id: UserId, fields: dict[str, Any]
    ) -> Carpool:
        """Rename a carpool or change its options (driver only).

        Raises:
            CarpoolDriverMismatchError: If the acting user is not the driver
            ValidationError: On any other field or an empty name
            ConflictError: If the new name is taken
        """
        with logfire.span(
            "carpool_service.update",
            carpool_id=str(carpool_id),
            acting_user_id=str(acting_user_id),
            fields=sorted(fields),
        ):
            await self.is_driver(carpool_id, acting_user_id)
            for key in fields:
                if key not in _UPDATABLE_FIELDS:
                    raise ValidationError(f"Cannot update '{key}' field!")

            changes = dict(fields)
            if "name" in changes:
                current = await self.get_by_id(carpool_id)
                if changes["name"] != current.name:
                    await self._ensure_name_available(changes["name"])
            if "options" in changes:
                changes["options"] = CarpoolOptions.model_validate(changes["options"])

            updated = await self.carpool_repository.update_fields(carpool_id, changes)
            if updated is None:
                raise NotFoundError("Carpool", str(carpool_id))
            logfire.info("Carpool updated", carpool_id=str(carpool_id))
            return updated

    async def delete(self, carpool_id: CarpoolId, acting_user_id: UserId) -> Carpool:
        """Delete a carpool.

        The driver may delete it; failing that, so may any member.

        Returns:
            The deleted carpool

        Raises:
            NotFoundError: If the carpool does not exist
            CarpoolMemberMismatchError: If the user is neither driver nor member
        """
        with logfire.span(
            "carpool_service.delete",
            carpool_id=str(carpool_id),
            acting_user_id=str(acting_user_id),
        ):
            try:
                await self.is_driver(carpool_id, acting_user_id)
            except CarpoolDriverMismatchError:
                await self.is_member(carpool_id, acting_user_id)

            carpool = await self.get_by_id(carpool_id)
            await self.carpool_repository.delete(carpool_id)
            logfire.info(
                "Carpool deleted",
                carpool_id=str(carpool_id),
                deleted_by=str(acting_user_id),
            )
            return carpool

    async def delete_by_target(self, target: TargetId) -> int:
        """Delete every carpool serving a target.

        Returns:
            Number of carpools deleted
        """
        with logfire.span("carpool_service.delete_by_target", target=str(target)):
            count = await self.carpool_repository.delete_many(
                CarpoolFilter(target=target)
            )
            logfire.info("Carpools deleted for target", target=str(target), count=count)
            return count

    async def get_by_id(self, carpool_id: CarpoolId) -> Carpool:
        """Get a carpool by ID.

        Raises:
            NotFoundError: If the carpool does not exist
        """
        carpool = await self.carpool_repository.find_by_id(carpool_id)
        if carpool is None:
            raise NotFoundError("Carpool", str(carpool_id))
        return carpool

    async def get_by_name(self, name: str) -> Carpool:
        """Get a carpool by name.

        Raises:
            NotFoundError: If no carpool has that name
        """
        carpool = await self.carpool_repository.find_by_name(name)
        if carpool is None:
            logfire.warn("Carpool not found", name=name)
            raise NotFoundError("Carpool", name)
        return carpool

    async def get_by_target(self, target: TargetId) -> list[Carpool]:
        return await self.list_carpools(CarpoolFilter(target=target))

    async def get_by_driver(self, driver_id: UserId) -> list[Carpool]:
        return await self.list_carpools(CarpoolFilter(driver=driver_id))

    async def list_carpools(
        self, query: Optional[CarpoolFilter] = None
    ) -> list[Carpool]:
        """List carpools, most recently updated first."""
        with logfire.span("carpool_service.list_carpools"):
            carpools = await self.carpool_repository.find_many(
                query or CarpoolFilter()
            )
            logfire.info("Carpools listed", count=len(carpools))
            return carpools

    async def _ensure_name_available(self, name: str) -> None:
        if not name:
            raise ValidationError(
                "The carpool must be named something (it must be non-empty)!"
            )
        self._check_length("carpool name", name, NAME_MAX_LENGTH)
        if await self.carpool_repository.find_by_name(name):
            logfire.warn("Carpool name taken", name=name)
            raise ConflictError(f"Carpool with the name '{name}' already exists!")
