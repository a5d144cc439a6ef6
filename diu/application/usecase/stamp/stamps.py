"""Daily stamp use cases."""

from datetime import date, datetime

from diu.application.usecase.base import BaseUseCase, CamelModel
from diu.domain.model.stamp import DailyStamp
from diu.domain.service import StampService
from diu.domain.value import UserId


class StampItem(CamelModel):
    """A single stamped day."""

    stamp_date: date
    created_at: datetime

    @classmethod
    def from_domain(cls, stamp: DailyStamp) -> "StampItem":
        return cls(stamp_date=stamp.stamp_date, created_at=stamp.created_at)


class StampTodayResponse(CamelModel):
    """Result of stamping today."""

    stamp: StampItem
    created: bool  # False when today was already stamped


class MyStampsResponse(CamelModel):
    """The requester's stamps with the current streak."""

    stamps: list[StampItem]
    streak: int
    total: int


class StampTodayUseCase(BaseUseCase):
    """Use case for recording today's stamp (idempotent)."""

    def __init__(self, stamp_service: StampService) -> None:
        self.stamp_service = stamp_service

    async def execute(self, user_id: str) -> StampTodayResponse:
        stamp, created = await self.stamp_service.record_today(UserId(user_id))
        return StampTodayResponse(stamp=StampItem.from_domain(stamp), created=created)


class GetMyStampsUseCase(BaseUseCase):
    """Use case for listing the requester's stamps, newest day first."""

    def __init__(self, stamp_service: StampService) -> None:
        self.stamp_service = stamp_service

    async def execute(self, user_id: str) -> MyStampsResponse:
        stamps, summary = await self.stamp_service.get_stamps(UserId(user_id))
        return MyStampsResponse(
            stamps=[StampItem.from_domain(stamp) for stamp in stamps],
            streak=summary.streak,
            total=len(stamps),
        )
