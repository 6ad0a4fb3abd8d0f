"""Unit tests for CreateReplyUseCase."""

from uuid import uuid4

import pytest
from dishka import AsyncContainer

from scribe.application.usecase.comment.create_reply import (
    CreateReplyRequest,
    CreateReplyUseCase,
)
from scribe.domain.error import NotFoundError
from scribe.domain.repository import UserRepository
from scribe.domain.service import CommentService
from scribe.domain.value import BlogId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateReplyUseCase:
    """Tests for CreateReplyUseCase."""

    @pytest.mark.asyncio
    async def test_reply_returns_whole_comment(self, unit_env: AsyncContainer):
        """The response is the parent comment with the reply last."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        comment_service = await unit_env.get(CommentService)
        author = await user_repo.create(make_user("author@example.com"))
        replier = await user_repo.create(make_user("replier@example.com"))
        comment = await comment_service.create_comment(
            BlogId(uuid4()), author.id, "Top"
        )
        await comment_service.add_reply(comment, author.id, "first")
        use_case = await unit_env.get(CreateReplyUseCase)

        # Act
        view = await use_case.execute(
            CreateReplyRequest(
                comment_id=str(comment.id), user_id=str(replier.id), content="second"
            )
        )

        # Assert
        assert view.id == str(comment.id)
        assert view.user.email == "author@example.com"
        assert [r.content for r in view.replies] == ["first", "second"]
        assert view.replies[-1].user.email == "replier@example.com"
        assert view.replies[-1].likes == []

    @pytest.mark.asyncio
    async def test_reply_to_missing_comment(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(CreateReplyUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateReplyRequest(
                    comment_id=str(uuid4()), user_id=str(uuid4()), content="hello"
                )
            )

    def test_empty_reply_rejected(self):
        with pytest.raises(ValueError):
            CreateReplyRequest(comment_id=str(uuid4()), user_id=str(uuid4()), content="")
