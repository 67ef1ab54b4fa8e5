"""Comment reply tree assembly.

Turns the flat list of comments stored for a post into an ordered forest of
reply trees. Pure functions only: no I/O, no shared state, so every read
builds an independent tree.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from agora.domain.model import Comment
from agora.domain.value import CommentId


@dataclass
class CommentNode:
    """Node in a comment reply tree.

    Represents a stored comment and its direct replies, in input order.
    """

    comment_id: CommentId
    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)


def build_comment_tree(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build the reply forest for one post.

    Algorithm (two passes, O(n)):
    1. Wrap every comment in a fresh node, keyed by comment ID
    2. Walk the comments again in the same order: top-level comments become
       roots, replies are appended to their parent's children

    A reply whose parent is not in the input (missing, or from another post)
    is dropped from the forest along with its own replies. If an ID appears
    more than once only the first occurrence is kept. Comments without an ID
    have never been stored and are ignored.

    Args:
        comments: Comments for a single post, in display order

    Returns:
        Root nodes in input order, each with children in input order
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        if comment.id is not None and comment.id not in nodes:
            nodes[comment.id] = CommentNode(comment_id=comment.id, comment=comment)

    roots: list[CommentNode] = []
    placed: set[CommentId] = set()
    for comment in comments:
        if comment.id is None or comment.id in placed:
            continue
        placed.add(comment.id)
        node = nodes[comment.id]

        if comment.parent_id is None:
            roots.append(node)
            continue

        parent = nodes.get(comment.parent_id)
        if parent is not None:
            parent.children.append(node)

    return roots


def walk_comment_tree(
    roots: Iterable[CommentNode],
) -> Iterator[tuple[CommentNode, int]]:
    """Walk a comment forest depth-first, parents before replies.

    Uses an explicit stack so reply chains deeper than the interpreter's
    recursion limit are still walked.

    Args:
        roots: Root nodes of the forest

    Yields:
        (node, depth) pairs, depth 0 for roots
    """
    stack: list[tuple[CommentNode, int]] = [(root, 0) for root in roots]
    stack.reverse()
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


def count_nodes(roots: Iterable[CommentNode]) -> int:
    """Count every node in a comment forest."""
    return sum(1 for _ in walk_comment_tree(roots))
