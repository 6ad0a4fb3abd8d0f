"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from scribe.application.usecase.view import CommentView, comment_view
from scribe.domain.error import NotFoundError
from scribe.domain.service import BlogService, CommentService, UserService
from scribe.domain.value import BlogId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    blog_id: str
    user_id: str  # Author, from the verified token
    content: str = Field(min_length=1)


class CreateCommentUseCase:
    """Use case for commenting on a blog."""

    def __init__(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            blog_service: Blog domain service
            user_service: User domain service (author info)
        """
        self.comment_service = comment_service
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the blog does not exist
        """
        blog_id = BlogId(UUID(request.blog_id))

        # Verify blog exists
        blog = await self.blog_service.get_blog_by_id(blog_id)
        if blog is None:
            raise NotFoundError("Blog", request.blog_id)

        comment = await self.comment_service.create_comment(
            blog_id=blog_id,
            author_id=UserId(UUID(request.user_id)),
            content=request.content,
        )

        authors = await self.user_service.get_authors(comment.author_ids())
        return comment_view(comment, authors)
