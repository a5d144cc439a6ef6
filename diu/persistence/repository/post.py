"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from diu.domain.model import Post
from diu.domain.repository import PostRepository
from diu.domain.value import PostId, UserId
from diu.persistence.mappers import post_to_dict, row_to_post
from diu.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_recent(self, limit: int = 20, offset: int = 0) -> List[Post]:
        """Find posts for the feed, newest first."""
        stmt = (
            select(posts_table)
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        await self.session.execute(posts_table.insert().values(**post_to_dict(post)))
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (comments and likes go by FK cascade)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
