"""Create reply use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from scribe.application.usecase.view import CommentView, comment_view
from scribe.domain.error import NotFoundError
from scribe.domain.service import CommentService, UserService
from scribe.domain.value import CommentId, UserId


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    comment_id: str
    user_id: str  # Reply author, from the verified token
    content: str = Field(min_length=1)


class CreateReplyUseCase:
    """Use case for replying to a comment.

    Replies are appended to the comment; the whole comment is returned.
    """

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateReplyRequest) -> CommentView:
        """Append a reply.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment_by_id(
            CommentId(UUID(request.comment_id))
        )
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        updated = await self.comment_service.add_reply(
            comment,
            author_id=UserId(UUID(request.user_id)),
            content=request.content,
        )

        authors = await self.user_service.get_authors(updated.author_ids())
        return comment_view(updated, authors)
