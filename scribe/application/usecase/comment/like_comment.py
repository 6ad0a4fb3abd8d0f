"""Like comment use case."""

from uuid import UUID

from pydantic import BaseModel

from scribe.application.usecase.view import CommentView, comment_view
from scribe.domain.error import NotFoundError
from scribe.domain.service import CommentService, UserService
from scribe.domain.value import CommentId, UserId


class LikeCommentRequest(BaseModel):
    """Like comment request."""

    comment_id: str
    user_id: str


class LikeCommentUseCase:
    """Use case for toggling a like on a comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: LikeCommentRequest) -> CommentView:
        """Toggle the caller's like.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment_by_id(
            CommentId(UUID(request.comment_id))
        )
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        updated = await self.comment_service.toggle_like(
            comment, UserId(UUID(request.user_id))
        )

        authors = await self.user_service.get_authors(updated.author_ids())
        return comment_view(updated, authors)
