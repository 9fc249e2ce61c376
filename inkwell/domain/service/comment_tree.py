"""Comment forest construction and traversal.

Builds the nested reply structure of a post's comments from the flat,
oldest-first list the backend returns. Pure functions; no I/O.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentId


@dataclass
class CommentNode:
    """A comment together with its direct replies, oldest first."""

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id


def build_comment_forest(comments: Iterable[Comment]) -> list[CommentNode]:
    """Build the comment forest for a post.

    Two linear passes: index every comment by id, then attach each node to
    its parent in input order. Since the input is already ordered by
    ``created_at``, every children list and the root list come out oldest
    first with no sorting step.

    A comment whose parent is not in the input becomes a root. Depth is
    not limited here.

    Args:
        comments: Comments of one post ordered by ``created_at`` ascending

    Returns:
        Root nodes in input order
    """
    ordered = list(comments)
    index: dict[CommentId, CommentNode] = {c.id: CommentNode(comment=c) for c in ordered}

    roots: list[CommentNode] = []
    for comment in ordered:
        node = index[comment.id]
        parent = index.get(comment.parent_id) if comment.parent_id else None
        if parent is not None and parent is not node:
            parent.children.append(node)
        else:
            roots.append(node)
    return roots


def walk_forest(roots: list[CommentNode]) -> Iterator[tuple[CommentNode, int]]:
    """Pre-order walk over a forest yielding ``(node, depth)``.

    Roots have depth 0. Siblings are visited in stored order. Uses an
    explicit stack so arbitrarily deep threads cannot hit the recursion
    limit.
    """
    stack: list[tuple[CommentNode, int]] = [(root, 0) for root in reversed(roots)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        for child in reversed(node.children):
            stack.append((child, depth + 1))


def count_nodes(roots: list[CommentNode]) -> int:
    """Total number of comments in a forest."""
    return sum(1 for _ in walk_forest(roots))
