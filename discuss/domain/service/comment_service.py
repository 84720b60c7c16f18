"""Comment domain service."""

import logfire

from discuss.domain.error import (
    DanglingReferenceError,
    ParentNotFoundError,
    PostNotFoundError,
)
from discuss.domain.model.comment import Comment, CommentNode
from discuss.domain.repository import CommentRepository, PostRepository
from discuss.domain.value import CommentId, PostId, UserId

from .base import Service
from .comment_tree import build_comment_tree, count_nodes


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (for existence checks)
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        The existence checks and the insert do not share a lock, so a parent
        can disappear in between. The repository's foreign key catches that
        case and it is reported the same way as a failed check.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment record (flat, not a tree node)

        Raises:
            PostNotFoundError: If the post does not exist or is deleted
            ParentNotFoundError: If the parent comment is not on this post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if not await self.post_repository.exists(post_id):
                logfire.warn("Post not found for comment", post_id=str(post_id))
                raise PostNotFoundError(str(post_id))

            if parent_id is not None and not await self.comment_repository.exists(
                parent_id, post_id=post_id
            ):
                logfire.warn(
                    "Parent comment not found on post",
                    parent_id=str(parent_id),
                    post_id=str(post_id),
                )
                raise ParentNotFoundError(str(parent_id))

            try:
                comment = await self.comment_repository.insert(
                    post_id=post_id,
                    author_id=author_id,
                    content=content,
                    parent_id=parent_id,
                )
            except DanglingReferenceError as e:
                logfire.error(
                    "Comment insert violated a reference",
                    reference=e.reference,
                    identifier=e.identifier,
                    post_id=str(post_id),
                )
                if e.reference == "parent_id":
                    raise ParentNotFoundError(e.identifier) from e
                raise PostNotFoundError(e.identifier) from e

            logfire.info(
                "Comment created",
                comment_id=str(comment.id),
                post_id=str(post_id),
                is_reply=parent_id is not None,
            )
            return comment

    async def get_comment_tree(self, post_id: PostId) -> list[CommentNode]:
        """Get a post's comments as a threaded forest.

        Soft-deleted comments are kept in the fetch so their replies stay
        attached; the deleted_at marker is carried on the node.

        Args:
            post_id: Post ID

        Returns:
            Top-level comment nodes, oldest first, with replies nested
        """
        with logfire.span("comment_service.get_comment_tree", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(
                post_id=post_id,
                include_deleted=True,
            )
            forest = build_comment_tree(comments)

            placed = count_nodes(forest)
            if placed < len(comments):
                logfire.warn(
                    "Unreachable comments left out of tree",
                    post_id=str(post_id),
                    dropped=len(comments) - placed,
                )
            logfire.info(
                "Comment tree built",
                post_id=str(post_id),
                roots=len(forest),
                count=placed,
            )
            return forest
