"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from huddle.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from huddle.domain.error import NotFoundError, ValidationError
from huddle.domain.service import CommentService, PostService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_top_level_comment(self, unit_env, alice, bob):
        # Arrange
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(CreateCommentUseCase)
        post = await post_service.create(alice, "Who is driving?")

        # Act
        response = await use_case.execute(
            CreateCommentRequest(author_id=str(bob), content="Me", post_id=str(post.id))
        )

        # Assert
        assert response.comment.target == post.id
        assert response.comment.root == post.id

    @pytest.mark.asyncio
    async def test_reply_targets_parent_and_roots_on_post(self, unit_env, alice, bob):
        """Replies carry both pointers: parent as target, post as root."""
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        use_case = await unit_env.get(CreateCommentUseCase)
        post = await post_service.create(alice, "Who is driving?")
        top = await use_case.execute(
            CreateCommentRequest(author_id=str(bob), content="Me", post_id=str(post.id))
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                author_id=str(alice),
                content="Thanks",
                post_id=str(post.id),
                parent_id=str(top.comment.id),
            )
        )

        # Assert
        assert reply.comment.target == top.comment.id
        assert reply.comment.root == post.id
        thread = await comment_service.get_by_root(post.id)
        assert {c.id for c in thread} == {top.comment.id, reply.comment.id}

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env, bob):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError, match="Post not found"):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=str(bob), content="Me", post_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_missing_parent(self, unit_env, alice, bob):
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(CreateCommentUseCase)
        post = await post_service.create(alice, "Who is driving?")

        with pytest.raises(NotFoundError, match="Comment not found"):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=str(bob),
                    content="Me",
                    post_id=str(post.id),
                    parent_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_parent_from_another_thread(self, unit_env, alice, bob):
        """A reply cannot stitch two threads together."""
        # Arrange
        post_service = await unit_env.get(PostService)
        use_case = await unit_env.get(CreateCommentUseCase)
        first = await post_service.create(alice, "First post")
        second = await post_service.create(alice, "Second post")
        elsewhere = await use_case.execute(
            CreateCommentRequest(
                author_id=str(bob), content="Hi", post_id=str(first.id)
            )
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="different thread"):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=str(bob),
                    content="Hi",
                    post_id=str(second.id),
                    parent_id=str(elsewhere.comment.id),
                )
            )
