"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment records.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find all comments for a post in chronological order.

        Comments are ordered by created_at ascending, with ties broken
        by comment ID so the order is deterministic.

        Args:
            post_id: The post ID
            include_deleted: Whether to include soft-deleted comments

        Returns:
            List of the post's comments, oldest first
        """
        pass

    @abstractmethod
    async def exists(
        self,
        comment_id: CommentId,
        post_id: Optional[PostId] = None,
    ) -> bool:
        """Check whether a comment exists.

        Args:
            comment_id: The comment ID
            post_id: If given, the comment must also belong to this post

        Returns:
            True if the comment exists
        """
        pass

    @abstractmethod
    async def insert(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment.

        The repository assigns id, created_at and updated_at.

        Args:
            post_id: Post the comment belongs to
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            The stored comment

        Raises:
            DanglingReferenceError: If post_id or parent_id violates a
                foreign key at insert time
        """
        pass
