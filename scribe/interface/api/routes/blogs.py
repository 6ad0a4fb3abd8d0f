"""Blog routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from scribe.application.usecase.blog import (
    CreateBlogRequest,
    CreateBlogUseCase,
    DeleteBlogRequest,
    DeleteBlogUseCase,
    GetBlogRequest,
    GetBlogUseCase,
    LikeBlogRequest,
    LikeBlogUseCase,
    ListBlogsRequest,
    ListBlogsUseCase,
    UpdateBlogRequest,
    UpdateBlogUseCase,
)
from scribe.application.usecase.view import BlogView, MessageResponse
from scribe.config import UploadSettings
from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.interface.api.auth import CurrentUserId, current_user_id
from scribe.interface.api.upload import read_image
from scribe.interface.error import UploadRejectedError, validation_message

router = APIRouter(prefix="/api/blogs", tags=["blogs"], route_class=DishkaRoute)


@router.post("", response_model=BlogView, status_code=status.HTTP_201_CREATED)
async def create_blog(
    create_blog_use_case: FromDishka[CreateBlogUseCase],
    user_id: CurrentUserId,
    upload_settings: FromDishka[UploadSettings],
    title: str = Form(...),
    description: str = Form(...),
    blog_image: UploadFile | None = File(default=None, alias="blogImage"),
) -> BlogView:
    """Create a new blog.

    Requires authentication. Multipart form with an optional ``blogImage``.

    Raises:
        HTTPException: If not authenticated, the image is rejected, or the
            upload or save fails
    """
    try:
        image = await read_image(blog_image, upload_settings)
        request = CreateBlogRequest(
            user_id=user_id, title=title, description=description, image=image
        )
        return await create_blog_use_case.execute(request)

    except UploadRejectedError as e:
        logfire.warn("Blog image rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        logfire.warn("Blog creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )
    except Exception as e:
        logfire.error("Unexpected error creating blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error creating blog",
        )


@router.get("", response_model=list[BlogView])
async def list_blogs(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
    user_id: CurrentUserId,
) -> list[BlogView]:
    """List the caller's own blogs, newest first."""
    try:
        result = await list_blogs_use_case.execute(ListBlogsRequest(user_id=user_id))
        return result.blogs

    except Exception as e:
        logfire.error("Unexpected error listing blogs", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching blogs",
        )


@router.get(
    "/{blog_id}",
    response_model=BlogView,
    dependencies=[Depends(current_user_id)],
)
async def get_blog(
    blog_id: UUID,
    get_blog_use_case: FromDishka[GetBlogUseCase],
) -> BlogView:
    """Get any blog by ID. Requires authentication."""

    try:
        return await get_blog_use_case.execute(GetBlogRequest(blog_id=str(blog_id)))

    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )
    except Exception as e:
        logfire.error("Unexpected error fetching blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching blog",
        )


@router.put("/{blog_id}", response_model=BlogView)
async def update_blog(
    blog_id: UUID,
    update_blog_use_case: FromDishka[UpdateBlogUseCase],
    user_id: CurrentUserId,
    upload_settings: FromDishka[UploadSettings],
    title: str = Form(...),
    description: str = Form(...),
    blog_image: UploadFile | None = File(default=None, alias="blogImage"),
) -> BlogView:
    """Update a blog's title, description and optionally its image.

    Only the owner can edit. The current image is kept when no new one is
    sent.
    """
    try:
        image = await read_image(blog_image, upload_settings)
        request = UpdateBlogRequest(
            blog_id=str(blog_id),
            user_id=user_id,
            title=title,
            description=description,
            image=image,
        )
        return await update_blog_use_case.execute(request)

    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized blog update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized"
        )
    except UploadRejectedError as e:
        logfire.warn("Blog image rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        logfire.warn("Blog update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=validation_message(e)
        )
    except Exception as e:
        logfire.error("Unexpected error updating blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error updating blog",
        )


@router.delete("/{blog_id}", response_model=MessageResponse)
async def delete_blog(
    blog_id: UUID,
    delete_blog_use_case: FromDishka[DeleteBlogUseCase],
    user_id: CurrentUserId,
) -> MessageResponse:
    """Delete a blog and all of its comments. Owner only."""
    try:
        return await delete_blog_use_case.execute(
            DeleteBlogRequest(blog_id=str(blog_id), user_id=user_id)
        )

    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized blog delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized"
        )
    except Exception as e:
        logfire.error("Unexpected error deleting blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting blog",
        )


@router.post("/{blog_id}/like", response_model=BlogView)
async def like_blog(
    blog_id: UUID,
    like_blog_use_case: FromDishka[LikeBlogUseCase],
    user_id: CurrentUserId,
) -> BlogView:
    """Like a blog, or remove the caller's like if already present."""
    try:
        return await like_blog_use_case.execute(
            LikeBlogRequest(blog_id=str(blog_id), user_id=user_id)
        )

    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Blog not found"
        )
    except Exception as e:
        logfire.error("Unexpected error liking blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error liking blog",
        )
