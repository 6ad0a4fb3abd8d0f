"""Comment and reply routes.

Nested under a blog. The blog segment of the comment sub-routes is not
checked against the comment's own blog.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from scribe.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    LikeCommentRequest,
    LikeCommentUseCase,
)
from scribe.application.usecase.view import CommentView, MessageResponse
from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.interface.api.auth import CurrentUserId, current_user_id

router = APIRouter(prefix="/api/blogs", tags=["comments"], route_class=DishkaRoute)


class ContentAPIRequest(BaseModel):
    """API request body for comments and replies."""

    content: str = Field(min_length=1)


@router.post(
    "/{blog_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    blog_id: UUID,
    request: ContentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    user_id: CurrentUserId,
) -> CommentView:
    """Comment on a blog.

    Requires authentication.

    Raises:
        HTTPException: 404 if the blog does not exist
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog_id), user_id=user_id, content=request.content
            )
        )

    except NotFoundError as e:
        logfire.warn("Comment on missing blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )
    except Exception as e:
        logfire.error("Unexpected error adding comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error adding comment",
        )


@router.get(
    "/{blog_id}/comments",
    response_model=list[CommentView],
    dependencies=[Depends(current_user_id)],
)
async def get_comments(
    blog_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentView]:
    """List a blog's comments, newest first, replies included."""

    try:
        result = await get_comments_use_case.execute(
            GetCommentsRequest(blog_id=str(blog_id))
        )
        return result.comments

    except Exception as e:
        logfire.error("Unexpected error fetching comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching comments",
        )


@router.delete("/{blog_id}/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    blog_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    user_id: CurrentUserId,
) -> MessageResponse:
    """Delete a comment. Author only."""
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(comment_id), user_id=user_id)
        )

    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found"
        )
    except NotAuthorizedError as e:
        logfire.warn(
            "Unauthorized comment delete attempt", blog_id=str(blog_id), error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized"
        )
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting comment",
        )


@router.post("/{blog_id}/comments/{comment_id}/like", response_model=CommentView)
async def like_comment(
    blog_id: UUID,
    comment_id: UUID,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    user_id: CurrentUserId,
) -> CommentView:
    """Like a comment, or remove the caller's like if already present."""
    try:
        return await like_comment_use_case.execute(
            LikeCommentRequest(comment_id=str(comment_id), user_id=user_id)
        )

    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found"
        )
    except Exception as e:
        logfire.error("Unexpected error liking comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error liking comment",
        )


@router.post(
    "/{blog_id}/comments/{comment_id}/replies",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    blog_id: UUID,
    comment_id: UUID,
    request: ContentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    user_id: CurrentUserId,
) -> CommentView:
    """Reply to a comment; returns the whole comment."""
    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(
                comment_id=str(comment_id), user_id=user_id, content=request.content
            )
        )

    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found"
        )
    except Exception as e:
        logfire.error("Unexpected error adding reply", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error adding reply",
        )
