"""In-memory comment repository for testing."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from discuss.domain.error import DanglingReferenceError
from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import CommentId, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Behaves like the database table: insert assigns the ID and a strictly
    increasing created_at, and parent_id is checked like a foreign key.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._last_created_at: datetime | None = None

    def _next_timestamp(self) -> datetime:
        """Return now, nudged forward if the clock has not moved."""
        now = datetime.now()
        if self._last_created_at is not None and now <= self._last_created_at:
            now = self._last_created_at + timedelta(microseconds=1)
        self._last_created_at = now
        return now

    async def find_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = False,
    ) -> list[Comment]:
        """Find all comments for a post, oldest first (ties by ID)."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        # Filter deleted
        if not include_deleted:
            comments = [c for c in comments if c.deleted_at is None]

        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def exists(
        self,
        comment_id: CommentId,
        post_id: Optional[PostId] = None,
    ) -> bool:
        """Check whether a comment exists, optionally on a given post."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return False
        return post_id is None or comment.post_id == post_id

    async def insert(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a comment with a generated ID and timestamps."""
        if parent_id is not None and parent_id not in self._comments:
            raise DanglingReferenceError("parent_id", str(parent_id))

        now = self._next_timestamp()
        comment = Comment(
            id=CommentId(uuid4()),
            post_id=post_id,
            author_id=author_id,
            content=content,
            parent_id=parent_id,
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )
        self._comments[comment.id] = comment
        return comment

    async def save(self, comment: Comment) -> Comment:
        """Store a comment as-is (test seeding, bypasses reference checks)."""
        self._comments[comment.id] = comment
        return comment
