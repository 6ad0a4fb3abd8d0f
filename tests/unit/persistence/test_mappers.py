"""Unit tests for row/model mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from scribe.domain.model import Comment, Reply
from scribe.domain.value import BlogId, CommentId, UserId
from scribe.persistence.mappers import (
    comment_to_dict,
    row_to_blog,
    row_to_comment,
    row_to_user,
)


class TestMappers:
    def test_user_row_normalizes_email(self):
        row = {
            "id": uuid4(),
            "email": "Writer@Example.com",
            "password_hash": "hash",
            "profile_image": None,
            "created_at": datetime.now(timezone.utc),
        }

        user = row_to_user(row)

        assert user.email.root == "writer@example.com"

    def test_blog_row_with_null_likes(self):
        row = {
            "id": uuid4(),
            "title": "T",
            "description": "D",
            "image": None,
            "user_id": uuid4(),
            "likes": None,
            "created_at": datetime.now(timezone.utc),
        }

        assert row_to_blog(row).likes == []

    def test_replies_survive_jsonb(self):
        """Replies are written as JSON and read back in the same order."""
        first_author, second_author = UserId(uuid4()), UserId(uuid4())
        comment = Comment(
            id=CommentId(uuid4()),
            blog_id=BlogId(uuid4()),
            user_id=UserId(uuid4()),
            content="Top",
            replies=[
                Reply(content="one", user_id=first_author, likes=[second_author]),
                Reply(content="two", user_id=second_author),
            ],
        )

        row = comment_to_dict(comment)

        # JSON mode: ids and timestamps are strings, ready for JSONB
        assert isinstance(row["replies"][0]["user_id"], str)
        assert isinstance(row["replies"][0]["created_at"], str)

        restored = row_to_comment(row)
        assert restored.replies == comment.replies
        assert [r.user_id for r in restored.replies] == [first_author, second_author]
