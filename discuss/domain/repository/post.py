"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.post import Post
from discuss.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists and is not soft-deleted.

        Args:
            post_id: The post ID

        Returns:
            True if the post exists and is not deleted
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        include_deleted: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, newest first.

        Args:
            include_deleted: Whether to include soft-deleted posts
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def count(self, include_deleted: bool = False) -> int:
        """Count posts.

        Args:
            include_deleted: Whether to include soft-deleted posts

        Returns:
            Total number of posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
