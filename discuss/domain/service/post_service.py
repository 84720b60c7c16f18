"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from discuss.domain.model.post import Post
from discuss.domain.repository import PostRepository
from discuss.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, author_id: UserId, title: str, content: str) -> Post:
        """Create a new post.

        Args:
            author_id: Author user ID
            title: Post title
            content: Post body

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=title
        ):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                author_id=author_id,
                created_at=now,
                updated_at=now,
                deleted_at=None,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found and not deleted, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                return None
            if post.deleted_at is not None:
                logfire.warn("Post is deleted", post_id=str(post_id))
                return None

            logfire.info("Post found", post_id=str(post_id), title=post.title)
            return post

    async def list_posts(self, limit: int = 30, offset: int = 0) -> list[Post]:
        """List posts, newest first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        with logfire.span("post_service.list_posts", limit=limit, offset=offset):
            posts = await self.post_repository.find_all(limit=limit, offset=offset)
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def count_posts(self) -> int:
        """Count non-deleted posts."""
        return await self.post_repository.count()
