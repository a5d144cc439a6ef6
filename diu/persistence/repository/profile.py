"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from diu.domain.model import Profile
from diu.domain.model.common import utc_now
from diu.domain.repository import ProfileRepository
from diu.domain.value import UserId, Username
from diu.persistence.mappers import profile_to_dict, row_to_profile
from diu.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user."""
        stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        stmt = select(profiles_table).where(profiles_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_user_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find profiles for several users in one query."""
        if not user_ids:
            return []
        stmt = select(profiles_table).where(profiles_table.c.user_id.in_(user_ids))
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def save(self, profile: Profile) -> Profile:
        """Insert a profile inside a savepoint."""
        async with self.session.begin_nested():
            await self.session.execute(
                profiles_table.insert().values(**profile_to_dict(profile))
            )
        return profile

    async def update_bio(self, user_id: UserId, bio: str | None) -> Optional[Profile]:
        """Update a user's bio."""
        stmt = (
            profiles_table.update()
            .where(profiles_table.c.user_id == user_id)
            .values(bio=bio, updated_at=utc_now())
            .returning(*profiles_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_profile(row._asdict()) if row else None
