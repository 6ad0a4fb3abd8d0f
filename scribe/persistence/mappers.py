"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from scribe.domain.model import Blog, Comment, Reply, User
from scribe.domain.value import BlogId, CommentId, Email, UserId


def _uuid(value: Any) -> UUID:
    """asyncpg returns UUIDs, JSONB payloads return strings."""
    return UUID(value) if isinstance(value, str) else value


def _likes(values: Optional[list[Any]]) -> list[UserId]:
    return [UserId(_uuid(v)) for v in values or []]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        profile_image=row.get("profile_image"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model."""
    return Blog(
        id=BlogId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        image=row.get("image"),
        user_id=UserId(_uuid(row["user_id"])),
        likes=_likes(row.get("likes")),
        created_at=row["created_at"],
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict."""
    return blog.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The ``replies`` column holds JSON, so reply timestamps and ids arrive as
    strings and are parsed by pydantic validation.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        blog_id=BlogId(_uuid(row["blog_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        likes=_likes(row.get("likes")),
        replies=[Reply.model_validate(r) for r in row.get("replies") or []],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Replies are dumped in JSON mode so they can be written to JSONB.
    """
    comment_dict = comment.model_dump(exclude={"replies"})
    comment_dict["replies"] = [r.model_dump(mode="json") for r in comment.replies]
    return comment_dict
