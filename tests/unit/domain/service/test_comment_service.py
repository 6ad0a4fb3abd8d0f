"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from scribe.domain.service import CommentService
from scribe.domain.value import BlogId, UserId
from scribe.persistence.repository.inmemory import InMemoryCommentRepository


@pytest.fixture
def comment_repo() -> InMemoryCommentRepository:
    return InMemoryCommentRepository()


@pytest.fixture
def service(comment_repo) -> CommentService:
    return CommentService(comment_repo)


class TestCreateComment:
    """Tests for CommentService.create_comment()."""

    @pytest.mark.asyncio
    async def test_new_comment_is_empty(self, service):
        """Should start without likes or replies."""
        comment = await service.create_comment(
            BlogId(uuid4()), UserId(uuid4()), "Great read"
        )

        assert comment.likes == []
        assert comment.replies == []
        assert comment.content == "Great read"


class TestAddReply:
    """Tests for CommentService.add_reply()."""

    @pytest.mark.asyncio
    async def test_replies_keep_append_order(self, service, comment_repo):
        """Each reply lands at the end and earlier ones stay as they were."""
        comment = await service.create_comment(
            BlogId(uuid4()), UserId(uuid4()), "Top"
        )
        first_author = UserId(uuid4())
        second_author = UserId(uuid4())

        after_first = await service.add_reply(comment, first_author, "one")
        after_second = await service.add_reply(after_first, second_author, "two")

        stored = await comment_repo.find_by_id(comment.id)
        assert [r.content for r in stored.replies] == ["one", "two"]
        assert stored.replies[0] == after_first.replies[0]
        assert stored.replies[1].user_id == second_author
        assert stored.replies[1].likes == []
        assert after_second == stored


class TestDeletion:
    """Tests for delete_comment() and delete_comments_for_blog()."""

    @pytest.mark.asyncio
    async def test_delete_comments_for_blog_only_touches_that_blog(
        self, service, comment_repo
    ):
        """Comments on other blogs survive."""
        blog_id = BlogId(uuid4())
        other_blog = BlogId(uuid4())
        doomed = [
            await service.create_comment(blog_id, UserId(uuid4()), f"c{i}")
            for i in range(3)
        ]
        survivor = await service.create_comment(other_blog, UserId(uuid4()), "keep")

        deleted = await service.delete_comments_for_blog(blog_id)

        assert deleted == 3
        for comment in doomed:
            assert await service.get_comment_by_id(comment.id) is None
        assert await service.get_comment_by_id(survivor.id) == survivor

    @pytest.mark.asyncio
    async def test_comments_for_unknown_blog_is_empty(self, service):
        """No existence check: an unknown blog simply has no comments."""
        assert await service.get_comments_for_blog(BlogId(uuid4())) == []
