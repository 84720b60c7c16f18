"""In-memory post repository for testing."""

from typing import Optional

from discuss.domain.model.post import Post
from discuss.domain.repository.post import PostRepository
from discuss.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a non-deleted post exists."""
        post = self._posts.get(post_id)
        return post is not None and post.deleted_at is None

    async def find_all(
        self,
        include_deleted: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts, newest first."""
        posts = list(self._posts.values())

        # Filter deleted
        if not include_deleted:
            posts = [p for p in posts if p.deleted_at is None]

        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)

        # Paginate
        return posts[offset : offset + limit]

    async def count(self, include_deleted: bool = False) -> int:
        """Count posts."""
        return sum(
            1
            for p in self._posts.values()
            if include_deleted or p.deleted_at is None
        )

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post
