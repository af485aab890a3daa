"""Carpool repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from huddle.domain.model.carpool import Carpool
from huddle.domain.value import CarpoolId, TargetId, UserId
from huddle.domain.value.common import ValueObject


class CarpoolFilter(ValueObject):
    """Equality and array-membership filter for carpools."""

    name: Optional[str] = None
    target: Optional[TargetId] = None
    driver: Optional[UserId] = None
    member: Optional[UserId] = None


class CarpoolRepository(ABC):
    """Repository for Carpool entity."""

    @abstractmethod
    async def find_by_id(self, carpool_id: CarpoolId) -> Optional[Carpool]:
        """Find a carpool by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Carpool]:
        """Find a carpool by its unique name."""
        pass

    @abstractmethod
    async def find_many(self, query: CarpoolFilter) -> list[Carpool]:
        """Find carpools matching a filter, most recently updated first."""
        pass

    @abstractmethod
    async def save(self, carpool: Carpool) -> Carpool:
        """Insert a new carpool.

        Raises:
            ConflictError: If the name is already taken
        """
        pass

    @abstractmethod
    async def update_fields(
        self, carpool_id: CarpoolId, fields: dict[str, Any]
    ) -> Optional[Carpool]:
        """Merge fields into a carpool and bump updated_at."""
        pass

    @abstractmethod
    async def add_member(self, carpool_id: CarpoolId, user_id: UserId) -> bool:
        """Atomically add a user to members; False if already present."""
        pass

    @abstractmethod
    async def remove_member(self, carpool_id: CarpoolId, user_id: UserId) -> bool:
        """Atomically remove a user from members."""
        pass

    @abstractmethod
    async def delete(self, carpool_id: CarpoolId) -> bool:
        """Delete a carpool (hard delete)."""
        pass

    @abstractmethod
    async def delete_many(self, query: CarpoolFilter) -> int:
        """Delete every carpool matching a filter.

        Returns:
            Number of carpools deleted
        """
        pass
