"""Post aggregate root.

Posts are short anonymous vents: text, a photo, or a video. Media bytes live
in object storage; the post only keeps the storage key.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from diu.domain.model.common import DomainModel, utc_now
from diu.domain.value import MediaType, PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    A post must carry text content, a media key, or both.
    Deleting a post removes its comments and likes (cascade in storage).
    """

    id: PostId
    author_id: UserId
    content: Optional[str] = Field(default=None, max_length=5000)
    media_key: Optional[str] = None
    media_type: MediaType = MediaType.TEXT
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_has_content(self) -> "Post":
        """Validate that text or media is present."""
        if not self.content and not self.media_key:
            raise ValueError("Post must contain either text content or a file")
        if self.media_key and self.media_type == MediaType.TEXT:
            raise ValueError("Media posts must be of type photo or video")
        return self
