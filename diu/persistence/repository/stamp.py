"""PostgreSQL implementation of Stamp repository."""

from datetime import date
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from diu.domain.model import DailyStamp
from diu.domain.repository import StampRepository
from diu.domain.value import UserId
from diu.persistence.mappers import row_to_stamp
from diu.persistence.tables import daily_stamps_table


class PostgresStampRepository(StampRepository):
    """PostgreSQL implementation of StampRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_and_date(
        self, user_id: UserId, stamp_date: date
    ) -> Optional[DailyStamp]:
        """Find a user's stamp for a given day."""
        stmt = select(daily_stamps_table).where(
            daily_stamps_table.c.user_id == user_id,
            daily_stamps_table.c.stamp_date == stamp_date,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_stamp(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[DailyStamp]:
        """Find all stamps of a user, most recent date first."""
        stmt = (
            select(daily_stamps_table)
            .where(daily_stamps_table.c.user_id == user_id)
            .order_by(desc(daily_stamps_table.c.stamp_date))
        )
        result = await self.session.execute(stmt)
        return [row_to_stamp(row._asdict()) for row in result.fetchall()]

    async def save(self, stamp: DailyStamp) -> DailyStamp:
        """Insert a stamp inside a savepoint."""
        async with self.session.begin_nested():
            await self.session.execute(
                daily_stamps_table.insert().values(**stamp.model_dump())
            )
        return stamp
