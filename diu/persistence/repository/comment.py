"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from diu.domain.model import Comment
from diu.domain.model.common import utc_now
from diu.domain.repository import CommentRepository
from diu.domain.value import CommentId, PostId, UserId
from diu.persistence.mappers import comment_to_dict, row_to_comment
from diu.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments by a specific author."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=utc_now())
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (replies and likes go by FK cascade)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count comments per post with one grouped query."""
        if not post_ids:
            return {}
        stmt = (
            select(comments_table.c.post_id, func.count())
            .where(comments_table.c.post_id.in_(post_ids))
            .group_by(comments_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        counts = {PostId(post_id): count for post_id, count in result.fetchall()}
        return {post_id: counts.get(post_id, 0) for post_id in post_ids}
