"""List posts use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from discuss.domain.service import PostService


class PostListItem(BaseModel):
    """Post list item in response."""

    post_id: str
    title: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime


class ListPostsRequest(BaseModel):
    """List posts request."""

    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostListItem]
    total: int
    limit: int
    offset: int


class ListPostsUseCase:
    """Use case for listing posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Pagination parameters

        Returns:
            A page of posts and the total count
        """
        posts = await self.post_service.list_posts(
            limit=request.limit, offset=request.offset
        )
        total = await self.post_service.count_posts()

        return ListPostsResponse(
            posts=[
                PostListItem(
                    post_id=str(post.id),
                    title=post.title,
                    content=post.content,
                    author_id=str(post.author_id),
                    created_at=post.created_at,
                    updated_at=post.updated_at,
                )
                for post in posts
            ],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
