"""Get post use case.

Returns a post together with its comment forest. The forest is sent flat,
in thread reading order (depth-first, oldest sibling first), with each
comment naming its parent, depth and children. Nested JSON would put a
ceiling on thread depth that the tree itself does not have.
"""

from datetime import datetime

from pydantic import BaseModel

from discuss.application.usecase.common import parse_uuid
from discuss.domain.error import PostNotFoundError
from discuss.domain.model import CommentNode
from discuss.domain.service import CommentService, PostService
from discuss.domain.value import PostId


class CommentNodeResponse(BaseModel):
    """Comment in a thread.

    Soft-deleted comments stay in place so their replies remain attached,
    but their content and author are withheld.
    """

    comment_id: str
    post_id: str
    author_id: str | None
    content: str | None
    parent_id: str | None
    depth: int
    child_ids: list[str]
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_forest(cls, forest: list[CommentNode]) -> list["CommentNodeResponse"]:
        """Flatten a domain comment forest into thread reading order.

        Walks the forest with an explicit stack so deep threads do not
        hit the recursion limit.

        Args:
            forest: Top-level comment nodes

        Returns:
            Every node in depth-first order, children oldest first
        """
        flat: list[CommentNodeResponse] = []
        stack: list[tuple[CommentNode, CommentNode | None, int]] = [
            (node, None, 0) for node in reversed(forest)
        ]
        while stack:
            node, parent, depth = stack.pop()
            deleted = node.deleted_at is not None
            flat.append(
                cls(
                    comment_id=str(node.id),
                    post_id=str(node.post_id),
                    author_id=None if deleted else str(node.author_id),
                    content=None if deleted else node.content,
                    parent_id=str(parent.id) if parent is not None else None,
                    depth=depth,
                    child_ids=[str(child.id) for child in node.children],
                    created_at=node.created_at,
                    updated_at=node.updated_at,
                    deleted_at=node.deleted_at,
                )
            )
            stack.extend(
                (child, node, depth + 1) for child in reversed(node.children)
            )
        return flat


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostResponse(BaseModel):
    """Get post response.

    ``root_ids`` lists top-level comments oldest first; ``comments`` holds
    every comment in the thread, flattened.
    """

    post_id: str
    title: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime
    root_ids: list[str]
    comments: list[CommentNodeResponse]
    comment_count: int


class GetPostUseCase:
    """Use case for reading a post with its comment tree."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Steps:
        1. Load the post (missing and deleted posts are not found)
        2. Fetch its comments and assemble them into a forest
        3. Flatten into response models

        Args:
            request: Get post request with post ID

        Returns:
            Post details with threaded comments

        Raises:
            PostNotFoundError: If the post does not exist or is deleted
        """
        post_uuid = parse_uuid(request.post_id)
        if post_uuid is None:
            raise PostNotFoundError(request.post_id)

        post = await self.post_service.get_post_by_id(PostId(post_uuid))
        if post is None:
            raise PostNotFoundError(request.post_id)

        forest = await self.comment_service.get_comment_tree(post.id)
        comments = CommentNodeResponse.from_forest(forest)

        return GetPostResponse(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            author_id=str(post.author_id),
            created_at=post.created_at,
            updated_at=post.updated_at,
            root_ids=[str(node.id) for node in forest],
            comments=comments,
            comment_count=len(comments),
        )
