"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from scribe.application.usecase.view import CommentView, comment_view
from scribe.domain.service import CommentService, UserService
from scribe.domain.value import BlogId, UserId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    blog_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentView]


class GetCommentsUseCase:
    """Use case for listing a blog's comments, newest first.

    The blog itself is not looked up: an unknown or deleted blog simply has
    no comments.
    """

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        comments = await self.comment_service.get_comments_for_blog(
            BlogId(UUID(request.blog_id))
        )

        # One lookup for every comment and reply author
        author_ids: set[UserId] = set()
        for comment in comments:
            author_ids |= comment.author_ids()
        authors = await self.user_service.get_authors(author_ids)

        return GetCommentsResponse(
            comments=[comment_view(c, authors) for c in comments]
        )
