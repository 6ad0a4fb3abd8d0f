"""Comment domain service."""

from uuid import uuid4

import logfire

from scribe.domain.model import Comment, Reply
from scribe.domain.repository import CommentRepository
from scribe.domain.value import BlogId, CommentId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment and reply operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, blog_id: BlogId, author_id: UserId, content: str
    ) -> Comment:
        """Create a comment on a blog.

        The caller is responsible for checking the blog exists.

        Args:
            blog_id: Blog ID
            author_id: Author user ID
            content: Comment text

        Returns:
            Created comment with no likes and no replies
        """
        with logfire.span(
            "comment_service.create_comment",
            blog_id=str(blog_id),
            author_id=str(author_id),
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                blog_id=blog_id,
                user_id=author_id,
                content=content,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), blog_id=str(blog_id)
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID, or None."""
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comments_for_blog(self, blog_id: BlogId) -> list[Comment]:
        """Get all comments on a blog, newest first.

        Args:
            blog_id: Blog ID

        Returns:
            Comments, empty if the blog has none or does not exist
        """
        with logfire.span(
            "comment_service.get_comments_for_blog", blog_id=str(blog_id)
        ):
            comments = await self.comment_repository.find_by_blog(blog_id)
            logfire.info(
                "Comments retrieved", blog_id=str(blog_id), count=len(comments)
            )
            return comments

    async def toggle_like(self, comment: Comment, user_id: UserId) -> Comment:
        """Flip ``user_id``'s like on a comment (last write wins)."""
        with logfire.span(
            "comment_service.toggle_like",
            comment_id=str(comment.id),
            user_id=str(user_id),
        ):
            saved = await self.comment_repository.save(comment.toggle_like(user_id))
            logfire.info(
                "Comment like toggled",
                comment_id=str(comment.id),
                liked=user_id in saved.likes,
            )
            return saved

    async def add_reply(
        self, comment: Comment, author_id: UserId, content: str
    ) -> Comment:
        """Append a reply to a comment and save the whole comment.

        Like toggles, this is an unguarded read-modify-write; two concurrent
        replies to the same comment may lose one of them.
        """
        with logfire.span(
            "comment_service.add_reply",
            comment_id=str(comment.id),
            author_id=str(author_id),
        ):
            reply = Reply(content=content, user_id=author_id)
            saved = await self.comment_repository.save(comment.add_reply(reply))
            logfire.info(
                "Reply added",
                comment_id=str(comment.id),
                reply_count=len(saved.replies),
            )
            return saved

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a single comment."""
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def delete_comments_for_blog(self, blog_id: BlogId) -> int:
        """Delete every comment on a blog; returns how many were removed."""
        with logfire.span(
            "comment_service.delete_comments_for_blog", blog_id=str(blog_id)
        ):
            deleted = await self.comment_repository.delete_by_blog(blog_id)
            logfire.info("Blog comments deleted", blog_id=str(blog_id), count=deleted)
            return deleted
