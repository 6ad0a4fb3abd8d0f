"""Create blog use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from scribe.application.usecase.view import BlogView, blog_view
from scribe.domain.service import BlogService, MediaService, UserService
from scribe.domain.value import ImageUpload, UserId


class CreateBlogRequest(BaseModel):
    """Create blog request."""

    user_id: str  # Owner, from the verified token
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    image: ImageUpload | None = None


class CreateBlogUseCase:
    """Use case for publishing a new blog."""

    def __init__(
        self,
        blog_service: BlogService,
        media_service: MediaService,
        user_service: UserService,
    ) -> None:
        """Initialize create blog use case.

        Args:
            blog_service: Blog domain service
            media_service: Media domain service
            user_service: User domain service (owner info)
        """
        self.blog_service = blog_service
        self.media_service = media_service
        self.user_service = user_service

    async def execute(self, request: CreateBlogRequest) -> BlogView:
        """Execute create blog flow.

        The image is uploaded before anything is stored, so a failed upload
        leaves no blog behind.

        Raises:
            MediaUploadError: If the image upload fails
        """
        owner_id = UserId(UUID(request.user_id))

        image_url = None
        if request.image is not None:
            image_url = await self.media_service.upload_blog_image(request.image)

        blog = await self.blog_service.create_blog(
            owner_id=owner_id,
            title=request.title,
            description=request.description,
            image=image_url,
        )

        authors = await self.user_service.get_authors([blog.user_id])
        return blog_view(blog, authors)
