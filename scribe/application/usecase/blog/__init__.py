"""Blog use cases."""

from .create_blog import CreateBlogRequest, CreateBlogUseCase
from .delete_blog import DeleteBlogRequest, DeleteBlogUseCase
from .get_blog import GetBlogRequest, GetBlogUseCase
from .like_blog import LikeBlogRequest, LikeBlogUseCase
from .list_blogs import ListBlogsRequest, ListBlogsResponse, ListBlogsUseCase
from .update_blog import UpdateBlogRequest, UpdateBlogUseCase

__all__ = [
    "CreateBlogRequest",
    "CreateBlogUseCase",
    "DeleteBlogRequest",
    "DeleteBlogUseCase",
    "GetBlogRequest",
    "GetBlogUseCase",
    "LikeBlogRequest",
    "LikeBlogUseCase",
    "ListBlogsRequest",
    "ListBlogsResponse",
    "ListBlogsUseCase",
    "UpdateBlogRequest",
    "UpdateBlogUseCase",
]
