"""Daily stamp entity."""

from datetime import date, datetime

from pydantic import Field

from diu.domain.model.common import DomainModel, utc_now
from diu.domain.value import StampId, UserId


class DailyStamp(DomainModel):
    """Proof that a user showed up on a given calendar day.

    One stamp per user per day (unique constraint in storage).
    """

    id: StampId
    user_id: UserId
    stamp_date: date
    created_at: datetime = Field(default_factory=utc_now)
