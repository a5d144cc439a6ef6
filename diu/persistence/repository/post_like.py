"""PostgreSQL implementation of PostLike repository."""

from typing import Optional, Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from diu.domain.model import PostLike
from diu.domain.repository import PostLikeRepository
from diu.domain.value import PostId, UserId
from diu.persistence.mappers import row_to_post_like
from diu.persistence.tables import post_likes_table


class PostgresPostLikeRepository(PostLikeRepository):
    """PostgreSQL implementation of PostLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[PostLike]:
        """Find a user's like on a post."""
        stmt = select(post_likes_table).where(
            post_likes_table.c.post_id == post_id,
            post_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post_like(row._asdict()) if row else None

    async def save(self, like: PostLike) -> PostLike:
        """Insert a like inside a savepoint."""
        async with self.session.begin_nested():
            await self.session.execute(
                post_likes_table.insert().values(**like.model_dump())
            )
        return like

    async def delete_by_post_and_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user's like on a post."""
        stmt = post_likes_table.delete().where(
            post_likes_table.c.post_id == post_id,
            post_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_by_post(
        self, post_id: PostId, limit: int = 20, offset: int = 0
    ) -> list[PostLike]:
        """Find the likes on a post, newest first."""
        stmt = (
            select(post_likes_table)
            .where(post_likes_table.c.post_id == post_id)
            .order_by(desc(post_likes_table.c.created_at), desc(post_likes_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post_like(row._asdict()) for row in result.fetchall()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        stmt = (
            select(func.count())
            .select_from(post_likes_table)
            .where(post_likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count likes per post with one grouped query."""
        if not post_ids:
            return {}
        stmt = (
            select(post_likes_table.c.post_id, func.count())
            .where(post_likes_table.c.post_id.in_(post_ids))
            .group_by(post_likes_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        counts = {PostId(post_id): count for post_id, count in result.fetchall()}
        return {post_id: counts.get(post_id, 0) for post_id in post_ids}

    async def find_liked_post_ids(
        self, user_id: UserId, post_ids: Sequence[PostId]
    ) -> set[PostId]:
        """Find which of the given posts a user likes."""
        if not post_ids:
            return set()
        stmt = select(post_likes_table.c.post_id).where(
            post_likes_table.c.user_id == user_id,
            post_likes_table.c.post_id.in_(post_ids),
        )
        result = await self.session.execute(stmt)
        return {PostId(post_id) for post_id in result.scalars().all()}
