"""Unit tests for DeleteActivityUseCase and PromoteMemberUseCase."""

import pytest

from huddle.application.usecase.activity import (
    DeleteActivityRequest,
    DeleteActivityUseCase,
    PromoteMemberRequest,
    PromoteMemberUseCase,
)
from huddle.domain.error import CreatorMismatchError, NotFoundError
from huddle.domain.service import ActivityService, CarpoolService
from huddle.domain.value import TargetId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPromoteMemberUseCase:
    """Tests for PromoteMemberUseCase."""

    @pytest.mark.asyncio
    async def test_promote(self, unit_env, alice, bob):
        # Arrange
        activity_service = await unit_env.get(ActivityService)
        use_case = await unit_env.get(PromoteMemberUseCase)
        record = await activity_service.create(alice, "Saturday Hike", "trailmix")
        await activity_service.add_member(record.id, bob, "trailmix")

        # Act
        response = await use_case.execute(
            PromoteMemberRequest(
                activity_id=str(record.id),
                acting_user_id=str(alice),
                target_user_id=str(bob),
            )
        )

        # Assert
        assert response.managers == [str(alice), str(bob)]


class TestDeleteActivityUseCase:
    """Tests for DeleteActivityUseCase."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_carpools(self, unit_env, alice, bob):
        """Carpools targeting the activity go with it; others stay."""
        # Arrange
        activity_service = await unit_env.get(ActivityService)
        carpool_service = await unit_env.get(CarpoolService)
        use_case = await unit_env.get(DeleteActivityUseCase)

        hike = await activity_service.create(alice, "Saturday Hike", "trailmix")
        swim = await activity_service.create(bob, "Sunday Swim", "towel")
        await carpool_service.create(alice, "Van", TargetId(hike.id))
        await carpool_service.create(alice, "Bus", TargetId(hike.id))
        survivor = await carpool_service.create(bob, "Bike", TargetId(swim.id))

        # Act
        response = await use_case.execute(
            DeleteActivityRequest(activity_id=str(hike.id), acting_user_id=str(alice))
        )

        # Assert
        assert response.carpools_deleted == 2
        with pytest.raises(NotFoundError):
            await activity_service.get_by_id(hike.id)
        assert await carpool_service.get_by_target(TargetId(hike.id)) == []
        assert (await carpool_service.get_by_id(survivor.id)).id == survivor.id

    @pytest.mark.asyncio
    async def test_non_creator_deletes_nothing(self, unit_env, alice, bob):
        """The creator check runs before any cascade."""
        # Arrange
        activity_service = await unit_env.get(ActivityService)
        carpool_service = await unit_env.get(CarpoolService)
        use_case = DeleteActivityUseCase(
            activity_service=activity_service, carpool_service=carpool_service
        )

        hike = await activity_service.create(alice, "Saturday Hike", "trailmix")
        await activity_service.add_member(hike.id, bob, "trailmix")
        await activity_service.promote(hike.id, alice, bob)
        carpool = await carpool_service.create(bob, "Van", TargetId(hike.id))

        # Act & Assert
        with pytest.raises(CreatorMismatchError):
            await use_case.execute(
                DeleteActivityRequest(
                    activity_id=str(hike.id), acting_user_id=str(bob)
                )
            )

        assert (await carpool_service.get_by_id(carpool.id)).id == carpool.id
        assert (await activity_service.get_by_id(hike.id)).id == hike.id
