"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from scribe.application.usecase.view import MessageResponse
from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.domain.service import CommentService
from scribe.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # Caller, must be the author


class DeleteCommentUseCase:
    """Use case for deleting one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> MessageResponse:
        """Delete a comment; the parent blog is left untouched.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the caller is not the author
        """
        comment_id = CommentId(UUID(request.comment_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        if not comment.is_authored_by(UserId(UUID(request.user_id))):
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        await self.comment_service.delete_comment(comment_id)
        return MessageResponse(message="Comment deleted")
