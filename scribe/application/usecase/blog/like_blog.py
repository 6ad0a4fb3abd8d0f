"""Like blog use case."""

from uuid import UUID

from pydantic import BaseModel

from scribe.application.usecase.view import BlogView, blog_view
from scribe.domain.error import NotFoundError
from scribe.domain.service import BlogService, UserService
from scribe.domain.value import BlogId, UserId


class LikeBlogRequest(BaseModel):
    """Like blog request."""

    blog_id: str
    user_id: str


class LikeBlogUseCase:
    """Use case for toggling a like on any blog.

    Liking a blog the caller already likes removes the like.
    """

    def __init__(self, blog_service: BlogService, user_service: UserService) -> None:
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: LikeBlogRequest) -> BlogView:
        """Toggle the caller's like.

        Raises:
            NotFoundError: If the blog does not exist
        """
        blog = await self.blog_service.get_blog_by_id(BlogId(UUID(request.blog_id)))
        if blog is None:
            raise NotFoundError("Blog", request.blog_id)

        updated = await self.blog_service.toggle_like(
            blog, UserId(UUID(request.user_id))
        )

        authors = await self.user_service.get_authors([updated.user_id])
        return blog_view(updated, authors)
