"""Unit tests for the in-memory activity repository set operations."""

from uuid import uuid4

import pytest

from huddle.domain.error import ConflictError
from huddle.domain.model import ActivityRecord
from huddle.domain.repository import ActivityFilter
from huddle.domain.value import ActivityId, CarpoolId, UserId
from huddle.persistence.repository.inmemory.activity import InMemoryActivityRepository


def make_record(name: str = "Saturday Hike") -> ActivityRecord:
    creator = UserId(uuid4())
    return ActivityRecord(
        id=ActivityId(uuid4()),
        name=name,
        join_code="trailmix",
        creator=creator,
        managers=[creator],
        members=[creator],
    )


class TestInMemoryActivityRepository:
    """Set semantics and filters of InMemoryActivityRepository."""

    @pytest.mark.asyncio
    async def test_add_member_is_set_add(self):
        # Arrange
        repo = InMemoryActivityRepository()
        record = await repo.save(make_record())
        user = UserId(uuid4())

        # Act
        first = await repo.add_member(record.id, user)
        second = await repo.add_member(record.id, user)

        # Assert
        assert first is True
        assert second is False
        stored = await repo.find_by_id(record.id)
        assert stored.members == [record.creator, user]
        assert stored.updated_at >= record.updated_at

    @pytest.mark.asyncio
    async def test_add_manager_requires_membership(self):
        """Managers can only be drawn from members."""
        repo = InMemoryActivityRepository()
        record = await repo.save(make_record())
        outsider = UserId(uuid4())

        assert await repo.add_manager(record.id, outsider) is False

        await repo.add_member(record.id, outsider)
        assert await repo.add_manager(record.id, outsider) is True

    @pytest.mark.asyncio
    async def test_mutations_on_missing_activity_return_false(self):
        repo = InMemoryActivityRepository()
        missing = ActivityId(uuid4())

        assert await repo.add_member(missing, UserId(uuid4())) is False
        assert await repo.add_carpool(missing, CarpoolId(uuid4())) is False
        assert await repo.update_fields(missing, {"name": "x"}) is None
        assert await repo.delete(missing) is False

    @pytest.mark.asyncio
    async def test_duplicate_name_on_save(self):
        repo = InMemoryActivityRepository()
        await repo.save(make_record("Hike"))

        with pytest.raises(ConflictError):
            await repo.save(make_record("Hike"))

    @pytest.mark.asyncio
    async def test_filters_on_array_membership(self):
        # Arrange
        repo = InMemoryActivityRepository()
        hike = await repo.save(make_record("Hike"))
        await repo.save(make_record("Swim"))
        user = UserId(uuid4())
        await repo.add_member(hike.id, user)

        # Act
        by_member = await repo.find_many(ActivityFilter(member=user))
        by_manager = await repo.find_many(ActivityFilter(manager=hike.creator))
        everything = await repo.find_many(ActivityFilter())

        # Assert
        assert [a.id for a in by_member] == [hike.id]
        assert [a.id for a in by_manager] == [hike.id]
        assert len(everything) == 2
