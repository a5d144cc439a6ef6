"""Like response model."""

from diu.application.usecase.base import CamelModel
from diu.domain.value import LikeState


class LikeStateResponse(CamelModel):
    """Like state of a post or comment for the requester."""

    liked: bool
    like_count: int

    @classmethod
    def from_domain(cls, state: LikeState) -> "LikeStateResponse":
        return cls(liked=state.liked, like_count=state.like_count)
