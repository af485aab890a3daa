"""Unit tests for DeletePostUseCase."""

from uuid import uuid4

import pytest

from huddle.application.usecase.post import DeletePostRequest, DeletePostUseCase
from huddle.domain.error import NotFoundError, PostAuthorMismatchError
from huddle.domain.service import CommentService, PostService
from huddle.domain.value import TargetId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_delete_removes_whole_thread(self, unit_env, alice, bob):
        """Every comment rooted on the post goes, at any depth."""
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(DeletePostUseCase)

        post = await post_service.create(alice, "Who is driving?")
        root = TargetId(post.id)
        c1 = await comment_service.create(bob, "Me", root)
        c2 = await comment_service.create(alice, "Great", TargetId(c1.id), root=root)
        await comment_service.create(bob, "Np", TargetId(c2.id), root=root)
        other_post = await post_service.create(bob, "Another")
        kept = await comment_service.create(alice, "Hi", TargetId(other_post.id))

        # Act
        response = await use_case.execute(
            DeletePostRequest(post_id=str(post.id), acting_user_id=str(alice))
        )

        # Assert
        assert response.comments_deleted == 3
        assert await comment_service.get_by_root(root) == []
        with pytest.raises(NotFoundError):
            await post_service.get_by_id(post.id)
        assert (await comment_service.get_by_id(kept.id)).id == kept.id

    @pytest.mark.asyncio
    async def test_only_author_deletes(self, unit_env, alice, bob):
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(DeletePostUseCase)
        post = await post_service.create(alice, "Who is driving?")
        await comment_service.create(bob, "Me", TargetId(post.id))

        # Act & Assert
        with pytest.raises(PostAuthorMismatchError):
            await use_case.execute(
                DeletePostRequest(post_id=str(post.id), acting_user_id=str(bob))
            )

        assert len(await comment_service.get_by_root(TargetId(post.id))) == 1

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env, alice):
        use_case = await unit_env.get(DeletePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeletePostRequest(post_id=str(uuid4()), acting_user_id=str(alice))
            )
