"""Update blog use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from scribe.application.usecase.view import BlogView, blog_view
from scribe.domain.error import NotAuthorizedError, NotFoundError
from scribe.domain.service import BlogService, MediaService, UserService
from scribe.domain.value import BlogId, ImageUpload, UserId


class UpdateBlogRequest(BaseModel):
    """Update blog request."""

    blog_id: str
    user_id: str  # Caller, must be the owner
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    image: ImageUpload | None = None  # Keep the current image when absent


class UpdateBlogUseCase:
    """Use case for editing a blog's content."""

    def __init__(
        self,
        blog_service: BlogService,
        media_service: MediaService,
        user_service: UserService,
    ) -> None:
        """Initialize update blog use case.

        Args:
            blog_service: Blog domain service
            media_service: Media domain service
            user_service: User domain service (owner info)
        """
        self.blog_service = blog_service
        self.media_service = media_service
        self.user_service = user_service

    async def execute(self, request: UpdateBlogRequest) -> BlogView:
        """Execute update blog flow.

        Steps:
        1. Retrieve the blog
        2. Check the caller owns it
        3. Upload the replacement image, if any
        4. Overwrite title and description (and image when replaced)

        Raises:
            NotFoundError: If the blog does not exist
            NotAuthorizedError: If the caller is not the owner
            MediaUploadError: If the image upload fails
        """
        blog_id = BlogId(UUID(request.blog_id))
        user_id = UserId(UUID(request.user_id))

        # 1. Retrieve existing blog
        blog = await self.blog_service.get_blog_by_id(blog_id)
        if blog is None:
            raise NotFoundError("Blog", request.blog_id)

        # 2. Check authorization (user owns blog)
        if not blog.is_owned_by(user_id):
            raise NotAuthorizedError("blog", request.blog_id, request.user_id)

        # 3. Upload before writing
        image_url = None
        if request.image is not None:
            image_url = await self.media_service.upload_blog_image(request.image)

        # 4. Update via service
        updated = await self.blog_service.update_content(
            blog,
            title=request.title,
            description=request.description,
            image=image_url,
        )

        authors = await self.user_service.get_authors([updated.user_id])
        return blog_view(updated, authors)
