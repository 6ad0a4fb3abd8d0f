"""List blogs use case."""

from uuid import UUID

from pydantic import BaseModel

from scribe.application.usecase.view import BlogView, blog_view
from scribe.domain.service import BlogService, UserService
from scribe.domain.value import UserId


class ListBlogsRequest(BaseModel):
    """List blogs request."""

    user_id: str  # Only this user's blogs are listed


class ListBlogsResponse(BaseModel):
    """List blogs response."""

    blogs: list[BlogView]


class ListBlogsUseCase:
    """Use case for listing the caller's own blogs, newest first."""

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: ListBlogsRequest) -> ListBlogsResponse:
        owner_id = UserId(UUID(request.user_id))

        blogs = await self.blog_service.list_blogs_for_owner(owner_id)
        authors = await self.user_service.get_authors(b.user_id for b in blogs)

        return ListBlogsResponse(blogs=[blog_view(b, authors) for b in blogs])
