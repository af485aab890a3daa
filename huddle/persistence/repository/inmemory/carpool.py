"""In-memory carpool repository for testing."""

from datetime import datetime
from typing import Any, Optional

from huddle.domain.error import ConflictError
from huddle.domain.model.carpool import Carpool
from huddle.domain.repository.carpool import CarpoolFilter, CarpoolRepository
from huddle.domain.value import CarpoolId, UserId


class InMemoryCarpoolRepository(CarpoolRepository):
    """In-memory implementation of CarpoolRepository for testing."""

    def __init__(self) -> None:
        self._carpools: dict[CarpoolId, Carpool] = {}

    async def find_by_id(self, carpool_id: CarpoolId) -> Optional[Carpool]:
        """Find a carpool by ID."""
        return self._carpools.get(carpool_id)

    async def find_by_name(self, name: str) -> Optional[Carpool]:
        """Find a carpool by name."""
        return next((c for c in self._carpools.values() if c.name == name), None)

    async def find_many(self, query: CarpoolFilter) -> list[Carpool]:
        """Find carpools matching a filter."""
        carpools = [c for c in self._carpools.values() if _matches(c, query)]
        carpools.sort(key=lambda c: c.updated_at, reverse=True)
        return carpools

    async def save(self, carpool: Carpool) -> Carpool:
        """Insert a new carpool."""
        if any(
            c.name == carpool.name and c.id != carpool.id
            for c in self._carpools.values()
        ):
            raise ConflictError(
                f"Carpool with the name '{carpool.name}' already exists!"
            )
        self._carpools[carpool.id] = carpool
        return carpool

    async def update_fields(
        self, carpool_id: CarpoolId, fields: dict[str, Any]
    ) -> Optional[Carpool]:
        """Merge fields into a carpool."""
        carpool = self._carpools.get(carpool_id)
        if carpool is None:
            return None

        name = fields.get("name")
        if name is not None and any(
            c.name == name and c.id != carpool_id for c in self._carpools.values()
        ):
            raise ConflictError(f"Carpool with the name '{name}' already exists!")

        return self._replace(carpool, **fields)

    async def add_member(self, carpool_id: CarpoolId, user_id: UserId) -> bool:
        """Add a user to members."""
        carpool = self._carpools.get(carpool_id)
        if carpool is None or user_id in carpool.members:
            return False
        self._replace(carpool, members=[*carpool.members, user_id])
        return True

    async def remove_member(self, carpool_id: CarpoolId, user_id: UserId) -> bool:
        """Remove a user from members."""
        carpool = self._carpools.get(carpool_id)
        if carpool is None or user_id not in carpool.members:
            return False
        self._replace(carpool, members=[m for m in carpool.members if m != user_id])
        return True

    async def delete(self, carpool_id: CarpoolId) -> bool:
        """Delete a carpool."""
        return self._carpools.pop(carpool_id, None) is not None

    async def delete_many(self, query: CarpoolFilter) -> int:
        """Delete every carpool matching a filter."""
        doomed = [c.id for c in self._carpools.values() if _matches(c, query)]
        for carpool_id in doomed:
            del self._carpools[carpool_id]
        return len(doomed)

    def _replace(self, carpool: Carpool, **changes: Any) -> Carpool:
        updated = Carpool.model_validate(
            {**carpool.model_dump(), **changes, "updated_at": datetime.now()}
        )
        self._carpools[carpool.id] = updated
        return updated


def _matches(carpool: Carpool, query: CarpoolFilter) -> bool:
    if query.name is not None and carpool.name != query.name:
        return False
    if query.target is not None and carpool.target != query.target:
        return False
    if query.driver is not None and carpool.driver != query.driver:
        return False
    if query.member is not None and query.member not in carpool.members:
        return False
    return True
