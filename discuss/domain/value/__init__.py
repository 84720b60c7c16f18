"""Domain value objects for the discussion service."""

from discuss.domain.value.identifiers import CommentId, PostId, UserId

__all__ = [
    "UserId",
    "PostId",
    "CommentId",
]
