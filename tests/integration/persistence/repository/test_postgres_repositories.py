"""Integration tests for the PostgreSQL repositories.

Run against a migrated database:

    DATABASE__URL=postgresql+asyncpg://... alembic upgrade head
    DATABASE__URL=postgresql+asyncpg://... pytest tests/integration
"""

import os
from uuid import uuid4

import pytest

from scribe.domain.error import AlreadyExistsError
from scribe.domain.model import Blog, Comment, Reply
from scribe.domain.repository import BlogRepository, CommentRepository, UserRepository
from scribe.domain.value import BlogId, CommentId
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="needs a PostgreSQL database (set DATABASE__URL)",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _email() -> str:
    return f"it-{uuid4().hex[:12]}@example.com"


class TestPostgresRepositories:
    """Round trips through the real schema."""

    @pytest.mark.asyncio
    async def test_duplicate_email_maps_to_already_exists(self, integration_env):
        """The unique index surfaces as a domain error, not IntegrityError."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        email = _email()
        await user_repo.create(make_user(email))

        # Act & Assert
        with pytest.raises(AlreadyExistsError):
            await user_repo.create(make_user(email.upper()))

    @pytest.mark.asyncio
    async def test_comment_replies_and_likes_persist(self, integration_env):
        """Replies keep their order and likes survive the uuid[] column."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        blog_repo = await integration_env.get(BlogRepository)
        comment_repo = await integration_env.get(CommentRepository)
        author = await user_repo.create(make_user(_email()))
        replier = await user_repo.create(make_user(_email()))
        blog = await blog_repo.save(
            Blog(id=BlogId(uuid4()), title="T", description="D", user_id=author.id)
        )
        comment = Comment(
            id=CommentId(uuid4()),
            blog_id=blog.id,
            user_id=author.id,
            content="Top",
            likes=[replier.id],
            replies=[
                Reply(content="one", user_id=replier.id),
                Reply(content="two", user_id=author.id, likes=[replier.id]),
            ],
        )

        # Act
        await comment_repo.save(comment)
        found = await comment_repo.find_by_id(comment.id)

        # Assert
        assert found is not None
        assert found.likes == [replier.id]
        assert [r.content for r in found.replies] == ["one", "two"]
        assert found.replies[1].likes == [replier.id]

    @pytest.mark.asyncio
    async def test_blog_like_update_and_cascade_delete(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        blog_repo = await integration_env.get(BlogRepository)
        comment_repo = await integration_env.get(CommentRepository)
        owner = await user_repo.create(make_user(_email()))
        blog = await blog_repo.save(
            Blog(id=BlogId(uuid4()), title="T", description="D", user_id=owner.id)
        )
        for text in ("a", "b"):
            await comment_repo.save(
                Comment(
                    id=CommentId(uuid4()),
                    blog_id=blog.id,
                    user_id=owner.id,
                    content=text,
                )
            )

        # Act
        await blog_repo.save(blog.toggle_like(owner.id))
        liked = await blog_repo.find_by_id(blog.id)
        deleted = await comment_repo.delete_by_blog(blog.id)
        await blog_repo.delete(blog.id)

        # Assert
        assert liked.likes == [owner.id]
        assert deleted == 2
        assert await comment_repo.find_by_blog(blog.id) == []
        assert await blog_repo.find_by_id(blog.id) is None
