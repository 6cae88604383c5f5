"""Comment thread reconstruction.

Comments are stored flat, each pointing at its parent. Rendering needs them
as a forest: one tree per root comment with replies nested underneath.
"""

from dataclasses import dataclass, field
from typing import Iterable

from inkwell.domain.model import Comment
from inkwell.domain.value import CommentId


@dataclass
class CommentNode:
    """Node in an article's comment forest.

    Wraps a comment and its direct replies, which are nodes themselves.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)

    def count(self) -> int:
        """Number of comments in this subtree, including this one."""
        return 1 + sum(reply.count() for reply in self.replies)


def _sort_key(node: CommentNode) -> tuple:
    # Comment id breaks created_at ties so repeated builds order identically
    return (node.comment.created_at, str(node.comment.id))


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Build the comment forest for one article.

    Algorithm:
    1. Allocate a node per comment, keyed by comment ID
    2. Link each reply into its parent's reply list; comments without a
       parent become roots
    3. Sort roots newest first
    4. Sort every reply list oldest first, so threads read chronologically

    A reply whose parent is not in the input is an orphan. Orphans (and
    anything beneath them) are dropped rather than promoted to roots.
    There is no depth limit here; the write path caps nesting.

    Args:
        comments: All comments of one article, in any order

    Returns:
        Root nodes with replies attached recursively
    """
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode(comment=comment) for comment in comments
    }

    roots: list[CommentNode] = []
    for node in nodes.values():
        parent_id = node.comment.parent_id
        if parent_id is None:
            roots.append(node)
        elif parent_id in nodes:
            nodes[parent_id].replies.append(node)

    roots.sort(key=_sort_key, reverse=True)

    # Each reply list is sorted once, whatever depth it sits at
    for node in nodes.values():
        node.replies.sort(key=_sort_key)

    return roots
