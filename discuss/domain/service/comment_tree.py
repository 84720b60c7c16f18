"""Comment tree assembly.

Turns a post's flat, parent-referencing comment records into an ordered
forest of CommentNode objects.

Algorithm (two passes, no recursion):
1. Map every comment ID to a fresh, childless node, in input order
2. Walk the input again and link each node under its parent, or into the
   root list when it has no parent

Because the input is already in chronological order and nodes are appended
in input order, every children list comes out oldest-first without sorting.
"""

from typing import Iterable, Sequence

from discuss.domain.model.comment import Comment, CommentNode
from discuss.domain.value import CommentId


def build_comment_tree(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build the comment forest for one post.

    The input must already be filtered to a single post and ordered by
    created_at ascending (ties by ID). It is not re-sorted here.

    Comments that cannot be reached from a top-level comment are left out:
    - replies whose parent is not in the input (orphans)
    - comments that name themselves as parent
    - comments on a parent cycle (A replies to B, B replies to A)

    Args:
        comments: Flat comment records in chronological order

    Returns:
        Top-level comment nodes in input order, with replies nested
    """
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode.from_comment(comment) for comment in comments
    }

    roots: list[CommentNode] = []
    for comment in comments:
        node = nodes[comment.id]

        if comment.parent_id is None:
            roots.append(node)
            continue

        # A self-reply would make the node its own child
        if comment.parent_id == comment.id:
            continue

        parent = nodes.get(comment.parent_id)
        if parent is not None:
            parent.children.append(node)

    return roots


def count_nodes(forest: Iterable[CommentNode]) -> int:
    """Count every node in a forest.

    Args:
        forest: Top-level comment nodes

    Returns:
        Number of nodes reachable from the given roots
    """
    stack = list(forest)
    total = 0
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.children)
    return total
