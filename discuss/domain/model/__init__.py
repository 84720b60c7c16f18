"""Domain models."""

from discuss.domain.model.comment import Comment, CommentNode
from discuss.domain.model.post import Post

__all__ = [
    "Comment",
    "CommentNode",
    "Post",
]
