"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from huddle.domain.error import NotFoundError, PostAuthorMismatchError, ValidationError
from huddle.domain.service import PostService
from huddle.domain.value import PostId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_post(self, unit_env, alice):
        service = await unit_env.get(PostService)

        post = await service.create(alice, "Who is driving Saturday?")

        assert post.author == alice
        assert (await service.get_by_id(post.id)).content == post.content

    @pytest.mark.asyncio
    async def test_empty_content_is_rejected(self, unit_env, alice):
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await service.create(alice, "")

    @pytest.mark.asyncio
    async def test_overlong_content_is_rejected(self, unit_env, alice):
        service = await unit_env.get(PostService)
        post = await service.create(alice, "draft")

        with pytest.raises(ValidationError, match="at most 10000 characters"):
            await service.create(alice, "x" * 10001)
        with pytest.raises(ValidationError, match="at most 10000 characters"):
            await service.update(post.id, {"content": "x" * 10001})


class TestReads:
    """Tests for get_by_id, get_by_author and list_posts."""

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await service.get_by_id(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_by_author(self, unit_env, alice, bob):
        service = await unit_env.get(PostService)
        mine = await service.create(alice, "mine")
        await service.create(bob, "theirs")

        posts = await service.get_by_author(alice)

        assert [p.id for p in posts] == [mine.id]
        assert len(await service.list_posts()) == 2


class TestUpdate:
    """Tests for is_author and update."""

    @pytest.mark.asyncio
    async def test_is_author(self, unit_env, alice, bob):
        service = await unit_env.get(PostService)
        post = await service.create(alice, "mine")

        assert await service.is_author(post.id, alice) is True
        with pytest.raises(PostAuthorMismatchError):
            await service.is_author(post.id, bob)

    @pytest.mark.asyncio
    async def test_update_content(self, unit_env, alice):
        # Arrange
        service = await unit_env.get(PostService)
        post = await service.create(alice, "draft")

        # Act
        updated = await service.update(post.id, {"content": "final"})

        # Assert
        assert updated.content == "final"
        assert updated.author == alice
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_author_is_not_updatable(self, unit_env, alice, bob):
        service = await unit_env.get(PostService)
        post = await service.create(alice, "draft")

        with pytest.raises(ValidationError, match="Cannot update 'author' field!"):
            await service.update(post.id, {"author": bob})

    @pytest.mark.asyncio
    async def test_update_missing_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.update(PostId(uuid4()), {"content": "x"})


class TestDelete:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_delete(self, unit_env, alice):
        service = await unit_env.get(PostService)
        post = await service.create(alice, "bye")

        await service.delete(post.id)

        with pytest.raises(NotFoundError):
            await service.get_by_id(post.id)

    @pytest.mark.asyncio
    async def test_delete_missing(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.delete(PostId(uuid4()))
