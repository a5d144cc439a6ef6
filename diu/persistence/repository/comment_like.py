"""PostgreSQL implementation of CommentLike repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from diu.domain.model import CommentLike
from diu.domain.repository import CommentLikeRepository
from diu.domain.value import CommentId, UserId
from diu.persistence.mappers import row_to_comment_like
from diu.persistence.tables import comment_likes_table


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        stmt = select(comment_likes_table).where(
            comment_likes_table.c.comment_id == comment_id,
            comment_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_like(row._asdict()) if row else None

    async def save(self, like: CommentLike) -> CommentLike:
        """Insert a like.

        Runs in a savepoint so a duplicate only rolls back this insert.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                comment_likes_table.insert().values(**like.model_dump())
            )
        return like

    async def delete_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Remove a user's like on a comment."""
        stmt = comment_likes_table.delete().where(
            comment_likes_table.c.comment_id == comment_id,
            comment_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        stmt = (
            select(func.count())
            .select_from(comment_likes_table)
            .where(comment_likes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes per comment with one grouped query."""
        if not comment_ids:
            return {}
        stmt = (
            select(comment_likes_table.c.comment_id, func.count())
            .where(comment_likes_table.c.comment_id.in_(comment_ids))
            .group_by(comment_likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        counts = {CommentId(cid): count for cid, count in result.fetchall()}
        return {cid: counts.get(cid, 0) for cid in comment_ids}

    async def find_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Find which of the given comments a user likes."""
        if not comment_ids:
            return set()
        stmt = select(comment_likes_table.c.comment_id).where(
            comment_likes_table.c.user_id == user_id,
            comment_likes_table.c.comment_id.in_(comment_ids),
        )
        result = await self.session.execute(stmt)
        return {CommentId(cid) for cid in result.scalars().all()}
