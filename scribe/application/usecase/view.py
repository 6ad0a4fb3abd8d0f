"""Response views shared by the use cases.

Domain models never leave the application layer; these views are what the
API serializes. Blogs, comments and replies carry their author's public
profile instead of a bare user id.
"""

from datetime import datetime
from typing import Mapping, Optional

from pydantic import BaseModel

from scribe.domain.model import Blog, Comment, Reply, User
from scribe.domain.value import UserId


class UserView(BaseModel):
    """A user as returned to clients. Never includes the password hash."""

    id: str
    email: str
    profile_image: Optional[str]
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            email=user.email.root,
            profile_image=user.profile_image,
            created_at=user.created_at,
        )


class AuthorInfo(BaseModel):
    """Public profile of a blog, comment or reply author."""

    id: str
    email: str
    profile_image: Optional[str]


class BlogView(BaseModel):
    id: str
    title: str
    description: str
    image: Optional[str]
    user: Optional[AuthorInfo]  # None when the owner no longer exists
    likes: list[str]
    created_at: datetime


class ReplyView(BaseModel):
    content: str
    user: Optional[AuthorInfo]
    likes: list[str]
    created_at: datetime


class CommentView(BaseModel):
    id: str
    blog_id: str
    content: str
    user: Optional[AuthorInfo]
    likes: list[str]
    replies: list[ReplyView]
    created_at: datetime


def author_info(user_id: UserId, authors: Mapping[UserId, User]) -> AuthorInfo | None:
    """Look up an author in a preloaded map."""
    user = authors.get(user_id)
    if user is None:
        return None
    return AuthorInfo(
        id=str(user.id), email=user.email.root, profile_image=user.profile_image
    )


def blog_view(blog: Blog, authors: Mapping[UserId, User]) -> BlogView:
    """Build a blog view with owner info attached."""
    return BlogView(
        id=str(blog.id),
        title=blog.title,
        description=blog.description,
        image=blog.image,
        user=author_info(blog.user_id, authors),
        likes=[str(uid) for uid in blog.likes],
        created_at=blog.created_at,
    )


def reply_view(reply: Reply, authors: Mapping[UserId, User]) -> ReplyView:
    return ReplyView(
        content=reply.content,
        user=author_info(reply.user_id, authors),
        likes=[str(uid) for uid in reply.likes],
        created_at=reply.created_at,
    )


def comment_view(comment: Comment, authors: Mapping[UserId, User]) -> CommentView:
    """Build a comment view; replies keep their append order."""
    return CommentView(
        id=str(comment.id),
        blog_id=str(comment.blog_id),
        content=comment.content,
        user=author_info(comment.user_id, authors),
        likes=[str(uid) for uid in comment.likes],
        replies=[reply_view(reply, authors) for reply in comment.replies],
        created_at=comment.created_at,
    )


class MessageResponse(BaseModel):
    """Acknowledgement for operations that return no entity."""

    message: str
