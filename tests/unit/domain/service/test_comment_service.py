"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from huddle.domain.error import AuthorMismatchError, NotFoundError, ValidationError
from huddle.domain.service import CommentService
from huddle.domain.value import CommentId, CommentOptions, TargetId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.fixture
def post_id() -> TargetId:
    return TargetId(uuid4())


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_root_defaults_to_target(self, unit_env, alice, post_id):
        """A direct reply to a post is its own thread's top level."""
        # Arrange
        service = await unit_env.get(CommentService)

        # Act
        comment = await service.create(alice, "First!", post_id)

        # Assert
        assert comment.target == post_id
        assert comment.root == post_id
        assert comment.is_top_level

    @pytest.mark.asyncio
    async def test_reply_keeps_thread_root(self, unit_env, alice, bob, post_id):
        # Arrange
        service = await unit_env.get(CommentService)
        parent = await service.create(alice, "First!", post_id)

        # Act
        reply = await service.create(
            bob, "Second", TargetId(parent.id), root=post_id
        )

        # Assert
        assert reply.target == parent.id
        assert reply.root == post_id
        assert not reply.is_top_level

    @pytest.mark.asyncio
    async def test_empty_content_is_rejected(self, unit_env, alice, post_id):
        service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await service.create(alice, "", post_id)

    @pytest.mark.asyncio
    async def test_overlong_content_is_rejected(self, unit_env, alice, post_id):
        service = await unit_env.get(CommentService)
        comment = await service.create(alice, "short", post_id)

        with pytest.raises(ValidationError, match="at most 10000 characters"):
            await service.create(alice, "x" * 10001, post_id)
        with pytest.raises(ValidationError, match="at most 10000 characters"):
            await service.update(comment.id, {"content": "x" * 10001})

    @pytest.mark.asyncio
    async def test_options_are_kept(self, unit_env, alice, post_id):
        service = await unit_env.get(CommentService)

        comment = await service.create(
            alice, "First!", post_id, options=CommentOptions(background_color="#fff")
        )

        assert comment.options.background_color == "#fff"


class TestThreadQueries:
    """Tests for get_by_target and get_by_root."""

    @pytest.mark.asyncio
    async def test_target_gives_one_level_root_gives_all(
        self, unit_env, alice, bob, post_id
    ):
        """Root queries see every depth; target queries see one level."""
        # Arrange
        service = await unit_env.get(CommentService)
        c1 = await service.create(alice, "top", post_id)
        c2 = await service.create(bob, "reply", TargetId(c1.id), root=post_id)
        c3 = await service.create(alice, "nested", TargetId(c2.id), root=post_id)

        # Act
        thread = await service.get_by_root(post_id)
        top_level = await service.get_by_target(post_id)
        under_c1 = await service.get_by_target(TargetId(c1.id))

        # Assert
        assert {c.id for c in thread} == {c1.id, c2.id, c3.id}
        assert [c.id for c in top_level] == [c1.id]
        assert [c.id for c in under_c1] == [c2.id]

    @pytest.mark.asyncio
    async def test_thread_is_most_recently_updated_first(
        self, unit_env, alice, post_id
    ):
        service = await unit_env.get(CommentService)
        older = await service.create(alice, "older", post_id)
        newer = await service.create(alice, "newer", post_id)

        thread = await service.get_by_root(post_id)

        assert [c.id for c in thread] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_get_by_author(self, unit_env, alice, bob, post_id):
        service = await unit_env.get(CommentService)
        mine = await service.create(alice, "mine", post_id)
        await service.create(bob, "theirs", post_id)

        comments = await service.get_by_author(alice)

        assert [c.id for c in comments] == [mine.id]


class TestAuthorship:
    """Tests for is_author and update."""

    @pytest.mark.asyncio
    async def test_is_author(self, unit_env, alice, bob, post_id):
        service = await unit_env.get(CommentService)
        comment = await service.create(alice, "mine", post_id)

        assert await service.is_author(comment.id, alice) is True
        with pytest.raises(AuthorMismatchError):
            await service.is_author(comment.id, bob)

    @pytest.mark.asyncio
    async def test_is_author_on_missing_comment(self, unit_env, alice):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.is_author(CommentId(uuid4()), alice)

    @pytest.mark.asyncio
    async def test_update_content(self, unit_env, alice, post_id):
        service = await unit_env.get(CommentService)
        comment = await service.create(alice, "tpyo", post_id)

        updated = await service.update(comment.id, {"content": "typo"})

        assert updated.content == "typo"
        assert updated.root == post_id
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_addressing_cannot_change(self, unit_env, alice, post_id):
        service = await unit_env.get(CommentService)
        comment = await service.create(alice, "mine", post_id)

        with pytest.raises(ValidationError, match="Cannot update 'root' field!"):
            await service.update(comment.id, {"root": TargetId(uuid4())})

    @pytest.mark.asyncio
    async def test_update_missing_comment(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.update(CommentId(uuid4()), {"content": "hello"})


class TestDelete:
    """Tests for delete, delete_by_root and delete_by_author."""

    @pytest.mark.asyncio
    async def test_delete_single_comment(self, unit_env, alice, bob, post_id):
        """Deleting a node leaves its replies reachable by root."""
        # Arrange
        service = await unit_env.get(CommentService)
        parent = await service.create(alice, "top", post_id)
        reply = await service.create(bob, "reply", TargetId(parent.id), root=post_id)

        # Act
        await service.delete(parent.id)

        # Assert
        thread = await service.get_by_root(post_id)
        assert [c.id for c in thread] == [reply.id]

    @pytest.mark.asyncio
    async def test_delete_missing_comment(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.delete(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_by_root_clears_thread(self, unit_env, alice, post_id):
        # Arrange
        service = await unit_env.get(CommentService)
        parent = await service.create(alice, "top", post_id)
        await service.create(alice, "reply", TargetId(parent.id), root=post_id)
        other = await service.create(alice, "elsewhere", TargetId(uuid4()))

        # Act
        count = await service.delete_by_root(post_id)

        # Assert
        assert count == 2
        assert await service.get_by_root(post_id) == []
        assert (await service.get_by_id(other.id)).id == other.id

    @pytest.mark.asyncio
    async def test_delete_by_author(self, unit_env, alice, bob, post_id):
        service = await unit_env.get(CommentService)
        await service.create(alice, "one", post_id)
        await service.create(alice, "two", post_id)
        theirs = await service.create(bob, "three", post_id)

        count = await service.delete_by_author(alice)

        assert count == 2
        assert [c.id for c in await service.list_comments()] == [theirs.id]
