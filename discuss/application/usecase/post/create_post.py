"""Create post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import PostService
from discuss.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    author_id: str  # User ID from the authenticated user


class CreatePostResponse(BaseModel):
    """Create post response."""

    post_id: str
    title: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Created post details
        """
        post = await self.post_service.create_post(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            content=request.content,
        )

        return CreatePostResponse(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            author_id=str(post.author_id),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
