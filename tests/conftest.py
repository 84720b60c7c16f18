"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from discuss.domain.model import Comment, Post
from discuss.domain.value import CommentId, PostId, UserId

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


def make_id(n: int) -> UUID:
    """Deterministic UUID for readable test scenarios (1 -> ...0001)."""
    return UUID(int=n)


def make_comment(
    comment_id: int | UUID,
    parent_id: int | UUID | None = None,
    t: int = 0,
    post_id: UUID | None = None,
    content: str | None = None,
) -> Comment:
    """Build a comment record for tree tests.

    Args:
        comment_id: Comment ID (ints are turned into UUIDs via make_id)
        parent_id: Parent comment ID, None for top-level
        t: Creation time as seconds after BASE_TIME
        post_id: Post ID (a fixed post by default)
        content: Comment text (derived from the ID by default)

    Returns:
        Comment record
    """
    cid = make_id(comment_id) if isinstance(comment_id, int) else comment_id
    pid = make_id(parent_id) if isinstance(parent_id, int) else parent_id
    created_at = BASE_TIME + timedelta(seconds=t)
    return Comment(
        id=CommentId(cid),
        post_id=PostId(post_id or make_id(1000)),
        author_id=UserId(make_id(2000)),
        content=content or f"comment {comment_id}",
        parent_id=CommentId(pid) if pid is not None else None,
        created_at=created_at,
        updated_at=created_at,
        deleted_at=None,
    )


def make_post(
    post_id: UUID | None = None,
    title: str = "Test Post",
    deleted_at: datetime | None = None,
) -> Post:
    """Build a post for service and use case tests."""
    return Post(
        id=PostId(post_id or uuid4()),
        title=title,
        content="Post body",
        author_id=UserId(uuid4()),
        created_at=datetime.now(),
        updated_at=datetime.now(),
        deleted_at=deleted_at,
    )
