"""Unit tests for JoinActivityUseCase."""

import pytest

from huddle.application.usecase.activity import (
    CreateActivityRequest,
    CreateActivityUseCase,
    JoinActivityRequest,
    JoinActivityUseCase,
)
from huddle.domain.error import AlreadyMemberError, InvalidJoinCodeError
from huddle.domain.service import ActivityService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create_activity(unit_env, creator) -> str:
    use_case = await unit_env.get(CreateActivityUseCase)
    response = await use_case.execute(
        CreateActivityRequest(
            creator_id=str(creator), name="Saturday Hike", join_code="trailmix"
        )
    )
    return str(response.activity.id)


class TestCreateActivityUseCase:
    """Tests for CreateActivityUseCase."""

    @pytest.mark.asyncio
    async def test_creator_sees_join_code_once(self, unit_env, alice):
        """Only the create response carries the join code."""
        # Arrange
        use_case = await unit_env.get(CreateActivityUseCase)
        activity_service = await unit_env.get(ActivityService)

        # Act
        response = await use_case.execute(
            CreateActivityRequest(
                creator_id=str(alice), name="Saturday Hike", join_code="trailmix"
            )
        )

        # Assert
        assert response.message == "Activity successfully created!"
        assert response.activity.join_code == "trailmix"
        stored = await activity_service.get_by_id(response.activity.id)
        assert "join_code" not in stored.model_dump()


class TestJoinActivityUseCase:
    """Tests for JoinActivityUseCase."""

    @pytest.mark.asyncio
    async def test_join_by_name(self, unit_env, alice, bob):
        # Arrange
        activity_id = await create_activity(unit_env, alice)
        use_case = await unit_env.get(JoinActivityUseCase)

        # Act
        response = await use_case.execute(
            JoinActivityRequest(
                user_id=str(bob), name="Saturday Hike", join_code="trailmix"
            )
        )

        # Assert
        assert response.activity_id == activity_id
        assert response.members == [str(alice), str(bob)]

    @pytest.mark.asyncio
    async def test_unknown_name_reads_as_wrong_code(self, unit_env, bob):
        use_case = await unit_env.get(JoinActivityUseCase)

        with pytest.raises(InvalidJoinCodeError, match="is incorrect"):
            await use_case.execute(
                JoinActivityRequest(user_id=str(bob), name="Nope", join_code="x")
            )

    @pytest.mark.asyncio
    async def test_wrong_code(self, unit_env, alice, bob):
        await create_activity(unit_env, alice)
        use_case = await unit_env.get(JoinActivityUseCase)

        with pytest.raises(InvalidJoinCodeError):
            await use_case.execute(
                JoinActivityRequest(
                    user_id=str(bob), name="Saturday Hike", join_code="granola"
                )
            )

    @pytest.mark.asyncio
    async def test_wrong_code_and_unknown_name_are_indistinguishable(
        self, unit_env, alice, bob
    ):
        """Neither the message nor the attached identifier reveals existence."""
        # Arrange
        activity_id = await create_activity(unit_env, alice)
        use_case = await unit_env.get(JoinActivityUseCase)

        # Act
        with pytest.raises(InvalidJoinCodeError) as wrong_code:
            await use_case.execute(
                JoinActivityRequest(
                    user_id=str(bob), name="Saturday Hike", join_code="granola"
                )
            )
        with pytest.raises(InvalidJoinCodeError) as unknown_name:
            await use_case.execute(
                JoinActivityRequest(user_id=str(bob), name="Nope", join_code="x")
            )

        # Assert
        assert str(wrong_code.value) == str(unknown_name.value)
        assert activity_id not in str(wrong_code.value)
        assert wrong_code.value.resource_id == "Saturday Hike"
        assert unknown_name.value.resource_id == "Nope"

    @pytest.mark.asyncio
    async def test_joining_twice(self, unit_env, alice, bob):
        await create_activity(unit_env, alice)
        use_case = await unit_env.get(JoinActivityUseCase)
        request = JoinActivityRequest(
            user_id=str(bob), name="Saturday Hike", join_code="trailmix"
        )
        await use_case.execute(request)

        with pytest.raises(AlreadyMemberError):
            await use_case.execute(request)
