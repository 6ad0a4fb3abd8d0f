"""In-memory comment repository for testing."""

from typing import Optional

from scribe.domain.model.comment import Comment
from scribe.domain.repository.comment import CommentRepository
from scribe.domain.value import BlogId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_blog(self, blog_id: BlogId) -> list[Comment]:
        """Find all comments on a blog, newest first."""
        comments = [c for c in self._comments.values() if c.blog_id == blog_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment on a blog."""
        doomed = [cid for cid, c in self._comments.items() if c.blog_id == blog_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
