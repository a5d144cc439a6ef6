"""Assembly of flat comment rows into nested reply trees."""

from collections import defaultdict
from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass, field

from diu.domain.model.comment import Comment
from diu.domain.value import ANONYMOUS_USERNAME, CommentId, UserId


@dataclass
class CommentNode:
    """Node in a post's comment tree.

    Wraps a stored comment with what the reader sees: the author's display
    name, the like count, whether the requester likes it, and its replies.
    """

    comment: Comment
    author_username: str
    like_count: int
    has_liked: bool
    replies: list["CommentNode"] = field(default_factory=list)


def build_comment_forest(
    comments: Sequence[Comment],
    usernames: Mapping[UserId, str],
    like_counts: Mapping[CommentId, int],
    liked_ids: Collection[CommentId],
    offset: int = 0,
    limit: int | None = None,
) -> list[CommentNode]:
    """Build the reply forest of a post.

    Algorithm:
    1. Build adjacency map of parent_id -> [child comments], keeping the
       input order (newest first) within every sibling group
    2. Roots are comments without a parent, plus replies whose parent is
       not in the input (deleted concurrently); those are promoted to roots
    3. Slice the root list with offset/limit
    4. Recursively build each kept root with its complete reply subtree

    Args:
        comments: Every comment of the post, newest first
        usernames: Author ID -> display name; missing authors show as anonymous
        like_counts: Comment ID -> number of likes; missing means 0
        liked_ids: Comments the requester likes (empty when anonymous)
        offset: Number of root comments to skip
        limit: Maximum number of root comments (None for all)

    Returns:
        Root CommentNodes with replies populated recursively
    """
    known_ids = {comment.id for comment in comments}

    adjacency: dict[CommentId, list[Comment]] = defaultdict(list)
    roots: list[Comment] = []
    for comment in comments:
        if comment.parent_id is not None and comment.parent_id in known_ids:
            adjacency[comment.parent_id].append(comment)
        else:
            roots.append(comment)

    end = None if limit is None else offset + limit
    page = roots[offset:end]

    def build_subtree(comment: Comment) -> CommentNode:
        """Build tree recursively from a comment node."""
        children = adjacency.get(comment.id, [])
        return CommentNode(
            comment=comment,
            author_username=usernames.get(comment.author_id, ANONYMOUS_USERNAME),
            like_count=like_counts.get(comment.id, 0),
            has_liked=comment.id in liked_ids,
            replies=[build_subtree(child) for child in children],
        )

    return [build_subtree(root) for root in page]


def count_nodes(nodes: Sequence[CommentNode]) -> int:
    """Count every node of a forest, replies included."""
    return sum(1 + count_nodes(node.replies) for node in nodes)
