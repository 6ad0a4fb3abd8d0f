"""Domain services."""

from .base import Service
from .blog_service import BlogService
from .comment_service import CommentService
from .jwt_service import JWTService
from .media_service import MediaService, MediaUploader
from .user_service import UserService

__all__ = [
    "BlogService",
    "CommentService",
    "JWTService",
    "MediaService",
    "MediaUploader",
    "Service",
    "UserService",
]
