"""Delete blog use case."""

from uuid import UUID

from pydantic import BaseModel

from scribe.application.usecase.view import MessageResponse
from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.domain.service import BlogService, CommentService
from scribe.domain.value import BlogId, UserId


class DeleteBlogRequest(BaseModel):
    """Delete blog request."""

    blog_id: str
    user_id: str  # Caller, must be the owner


class DeleteBlogUseCase:
    """Use case for deleting a blog together with its comments."""

    def __init__(
        self, blog_service: BlogService, comment_service: CommentService
    ) -> None:
        """Initialize delete blog use case.

        Args:
            blog_service: Blog domain service
            comment_service: Comment domain service
        """
        self.blog_service = blog_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteBlogRequest) -> MessageResponse:
        """Execute delete blog flow.

        Comments go first, then the blog; both happen in the request's
        transaction.

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If the caller is not the owner
        """
        blog_id = BlogId(UUID(request.blog_id))
        user_id = UserId(UUID(request.user_id))

        blog = await self.blog_service.get_blog_by_id(blog_id)
        if blog is None:
            raise NotFoundError("Blog", request.blog_id)

        if not blog.is_owned_by(user_id):
            raise NotAuthorizedError("blog", request.blog_id, request.user_id)

        await self.comment_service.delete_comments_for_blog(blog_id)
        await self.blog_service.delete_blog(blog_id)

        return MessageResponse(message="Blog deleted")
