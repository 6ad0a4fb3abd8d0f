"""Unit tests for like toggling and reply appends on domain models."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from scribe.domain.model import Blog, Comment, Reply
from scribe.domain.value import BlogId, CommentId, UserId


def _blog(**kwargs) -> Blog:
    return Blog(
        id=BlogId(uuid4()),
        title="Hello",
        description="First post",
        user_id=kwargs.pop("user_id", UserId(uuid4())),
        **kwargs,
    )


def _comment(**kwargs) -> Comment:
    return Comment(
        id=CommentId(uuid4()),
        blog_id=BlogId(uuid4()),
        user_id=UserId(uuid4()),
        content="Nice post",
        **kwargs,
    )


class TestBlogLikes:
    """Tests for Blog.toggle_like()."""

    def test_toggle_adds_missing_like(self):
        """Should add the user when they have not liked yet."""
        blog = _blog()
        user_id = UserId(uuid4())

        liked = blog.toggle_like(user_id)

        assert liked.likes == [user_id]
        assert blog.likes == []  # original untouched

    def test_toggle_twice_restores_likes(self):
        """Liking then unliking should give back the original set."""
        other = UserId(uuid4())
        blog = _blog(likes=[other])
        user_id = UserId(uuid4())

        restored = blog.toggle_like(user_id).toggle_like(user_id)

        assert restored.likes == [other]

    def test_duplicate_likes_collapse(self):
        """Likes behave as a set even if storage held duplicates."""
        user_id = UserId(uuid4())

        blog = _blog(likes=[user_id, user_id])

        assert blog.likes == [user_id]

    def test_empty_title_rejected(self):
        """Title must be non-empty."""
        with pytest.raises(ValidationError):
            Blog(
                id=BlogId(uuid4()),
                title="",
                description="x",
                user_id=UserId(uuid4()),
            )


class TestCommentReplies:
    """Tests for Comment.add_reply() and Comment.toggle_like()."""

    def test_reply_is_appended_last(self):
        """New replies go to the end and earlier ones are unchanged."""
        first = Reply(content="first", user_id=UserId(uuid4()))
        comment = _comment(replies=[first])
        second = Reply(content="second", user_id=UserId(uuid4()))

        updated = comment.add_reply(second)

        assert [r.content for r in updated.replies] == ["first", "second"]
        assert updated.replies[0] == first
        assert len(comment.replies) == 1

    def test_comment_like_toggle(self):
        """Comment likes toggle like blog likes."""
        comment = _comment()
        user_id = UserId(uuid4())

        assert comment.toggle_like(user_id).likes == [user_id]
        assert comment.toggle_like(user_id).toggle_like(user_id).likes == []

    def test_author_ids_include_reply_authors(self):
        """author_ids() covers the comment author and all reply authors."""
        replier = UserId(uuid4())
        comment = _comment(replies=[Reply(content="hi", user_id=replier)])

        assert comment.author_ids() == {comment.user_id, replier}
