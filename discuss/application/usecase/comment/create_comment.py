"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.common import parse_uuid
from discuss.domain.error import ParentNotFoundError, PostNotFoundError
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # User ID from the authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response.

    The flat record; callers that need the thread re-read the post.
    """

    comment_id: str
    post_id: str
    author_id: str
    content: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        IDs that are not valid UUIDs cannot name an existing post or comment,
        so they fail the same way as unknown IDs.

        Args:
            request: Create comment request

        Returns:
            Created comment details

        Raises:
            PostNotFoundError: If the post does not exist or is deleted
            ParentNotFoundError: If the parent comment is not on this post
        """
        post_uuid = parse_uuid(request.post_id)
        if post_uuid is None:
            raise PostNotFoundError(request.post_id)

        parent_id = None
        if request.parent_id is not None:
            parent_uuid = parse_uuid(request.parent_id)
            if parent_uuid is None:
                raise ParentNotFoundError(request.parent_id)
            parent_id = CommentId(parent_uuid)

        comment = await self.comment_service.create_comment(
            post_id=PostId(post_uuid),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
