"""Domain model entities for DIU."""

from diu.domain.model.comment import Comment
from diu.domain.model.comment_like import CommentLike
from diu.domain.model.post import Post
from diu.domain.model.post_like import PostLike
from diu.domain.model.profile import Profile
from diu.domain.model.stamp import DailyStamp

__all__ = [
    "Comment",
    "CommentLike",
    "DailyStamp",
    "Post",
    "PostLike",
    "Profile",
]
