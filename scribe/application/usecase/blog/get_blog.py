"""Get blog use case."""

from uuid import UUID

from pydantic import BaseModel

from scribe.application.usecase.view import BlogView, blog_view
from scribe.domain.error import NotFoundError
from scribe.domain.service import BlogService, UserService
from scribe.domain.value import BlogId


class GetBlogRequest(BaseModel):
    """Get blog request."""

    blog_id: str


class GetBlogUseCase:
    """Use case for reading any blog by ID."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: GetBlogRequest) -> BlogView:
        """Fetch a blog with its owner info.

        Raises:
            NotFoundError: If the blog does not exist
        """
        blog = await self.blog_service.get_blog_by_id(BlogId(UUID(request.blog_id)))
        if blog is None:
            raise NotFoundError("Blog", request.blog_id)

        authors = await self.user_service.get_authors([blog.user_id])
        return blog_view(blog, authors)
