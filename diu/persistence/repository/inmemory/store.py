"""Shared in-memory storage for the in-memory repositories.

One store lives for the whole container, so rows written in one request are
visible in the next. Cascades mirror the ``ON DELETE CASCADE`` foreign keys
of the real schema.
"""

from datetime import date

from diu.domain.model import Comment, CommentLike, DailyStamp, Post, PostLike, Profile
from diu.domain.value import CommentId, PostId, UserId


class InMemoryStore:
    """Tables as dicts keyed by primary key (insertion ordered)."""

    def __init__(self) -> None:
        self.profiles: dict[UserId, Profile] = {}
        self.posts: dict[PostId, Post] = {}
        self.post_likes: dict[tuple[PostId, UserId], PostLike] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.comment_likes: dict[tuple[CommentId, UserId], CommentLike] = {}
        self.stamps: dict[tuple[UserId, date], DailyStamp] = {}

    def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment, its replies at any depth, and their likes."""
        if comment_id not in self.comments:
            return False

        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent_id = frontier.pop()
            for comment in self.comments.values():
                if comment.parent_id == parent_id and comment.id not in doomed:
                    doomed.add(comment.id)
                    frontier.append(comment.id)

        for doomed_id in doomed:
            del self.comments[doomed_id]
        self.comment_likes = {
            key: like
            for key, like in self.comment_likes.items()
            if like.comment_id not in doomed
        }
        return True

    def delete_post(self, post_id: PostId) -> bool:
        """Delete a post with its likes, comments and comment likes."""
        if self.posts.pop(post_id, None) is None:
            return False

        self.post_likes = {
            key: like for key, like in self.post_likes.items() if like.post_id != post_id
        }
        doomed = {c.id for c in self.comments.values() if c.post_id == post_id}
        self.comments = {
            cid: comment for cid, comment in self.comments.items() if cid not in doomed
        }
        self.comment_likes = {
            key: like
            for key, like in self.comment_likes.items()
            if like.comment_id not in doomed
        }
        return True
