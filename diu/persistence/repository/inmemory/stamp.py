"""In-memory stamp repository for testing."""

from datetime import date
from typing import Optional

from sqlalchemy.exc import IntegrityError

from diu.domain.model.stamp import DailyStamp
from diu.domain.repository.stamp import StampRepository
from diu.domain.value import UserId

from .store import InMemoryStore


class InMemoryStampRepository(StampRepository):
    """In-memory implementation of StampRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_date(
        self, user_id: UserId, stamp_date: date
    ) -> Optional[DailyStamp]:
        """Find a user's stamp for a given day."""
        return self._store.stamps.get((user_id, stamp_date))

    async def find_by_user(self, user_id: UserId) -> list[DailyStamp]:
        """Find all stamps of a user, most recent date first."""
        stamps = [s for s in self._store.stamps.values() if s.user_id == user_id]
        return sorted(stamps, key=lambda s: s.stamp_date, reverse=True)

    async def save(self, stamp: DailyStamp) -> DailyStamp:
        """Save a stamp.

        Raises:
            IntegrityError: If the user already has a stamp for that day
        """
        key = (stamp.user_id, stamp.stamp_date)
        if key in self._store.stamps:
            raise IntegrityError("Duplicate stamp", None, Exception())
        self._store.stamps[key] = stamp
        return stamp
