"""Daily stamp repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from diu.domain.model.stamp import DailyStamp
from diu.domain.value import UserId


class StampRepository(ABC):
    """Repository for DailyStamp entity."""

    @abstractmethod
    async def find_by_user_and_date(
        self, user_id: UserId, stamp_date: date
    ) -> Optional[DailyStamp]:
        """Find a user's stamp for a given day."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[DailyStamp]:
        """Find all stamps of a user, most recent date first."""
        pass

    @abstractmethod
    async def save(self, stamp: DailyStamp) -> DailyStamp:
        """Insert a stamp.

        Raises:
            IntegrityError: If the user already has a stamp for that day
        """
        pass
