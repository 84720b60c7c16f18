"""Comment record and comment tree node.

Comments are stored flat, each pointing at its parent through a nullable
``parent_id``. The tree form only exists for the duration of a read.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment record as persisted.

    A comment is either top-level (``parent_id`` is None) or a reply to
    another comment. ``created_at`` is assigned by the repository on insert.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None


@dataclass
class CommentNode:
    """Node in a post's comment tree.

    Carries every record field except ``parent_id``; the parent is implied
    by position. ``children`` are ordered oldest first.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None
    children: list["CommentNode"] = field(default_factory=list)

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentNode":
        """Create a childless node from a comment record."""
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            author_id=comment.author_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            deleted_at=comment.deleted_at,
        )
