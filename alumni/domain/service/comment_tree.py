"""Comment tree assembly.

Comments are persisted flat (each one only knows its parent). This module
rebuilds the reply hierarchy for one post at read time.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from alumni.domain.model import Comment
from alumni.domain.value import AccountId, CommentId, PostId


@dataclass
class CommentTreeNode:
    """Node in a post's comment tree.

    Represents a comment and its replies in conversation order.
    """

    id: CommentId
    content: str
    author_id: AccountId | None
    created_at: datetime
    replies: list["CommentTreeNode"] = field(default_factory=list)


@dataclass
class CommentThread:
    """All comments of a post as a tree, plus the flat comment count."""

    post_id: PostId
    comments: list[CommentTreeNode]
    total: int


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentTreeNode]:
    """Build the comment tree of a single post.

    Algorithm:
    1. Drop repeated ids (first occurrence in input order wins) and
       comments that name themselves as parent
    2. Stable-sort the rest by created_at ascending and index a node per id
    3. Attach every reply to its parent node (replies stay ascending)
    4. Collect root comments and order them by created_at descending

    Replies whose parent is missing from the input (orphans) are dropped,
    along with anything nested under them. Ties on created_at keep input
    order at every level.

    Args:
        comments: Flat comments, all belonging to the same post

    Returns:
        Root nodes, newest first, with replies populated recursively
    """
    unique: dict[CommentId, Comment] = {}
    for comment in comments:
        if comment.id in unique or comment.parent_id == comment.id:
            continue
        unique[comment.id] = comment

    ordered = sorted(unique.values(), key=lambda c: c.created_at)
    nodes = {
        comment.id: CommentTreeNode(
            id=comment.id,
            content=comment.content,
            author_id=comment.author_id,
            created_at=comment.created_at,
        )
        for comment in ordered
    }

    roots: list[CommentTreeNode] = []
    for comment in ordered:
        node = nodes[comment.id]
        if comment.parent_id is None:
            roots.append(node)
            continue

        parent = nodes.get(comment.parent_id)
        if parent is not None:
            parent.replies.append(node)

    # sort(reverse=True) keeps equal timestamps in their original order
    roots.sort(key=lambda n: n.created_at, reverse=True)
    return roots


def count_nodes(roots: list[CommentTreeNode]) -> int:
    """Count every node reachable from the given roots."""
    total = 0
    stack = list(roots)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.replies)
    return total
