"""PostgreSQL implementation of PostLike repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import PostLike
from alumni.domain.repository import PostLikeRepository
from alumni.domain.value import PostId, PostLikeId
from alumni.persistence.mappers import post_like_to_dict, row_to_post_like
from alumni.persistence.tables import post_likes_table


class PostgresPostLikeRepository(PostLikeRepository):
    """PostgreSQL implementation of PostLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post_and_liker(
        self, post_id: PostId, liker_key: str
    ) -> Optional[PostLike]:
        """Find the like a liker left on a post, if any."""
        stmt = select(post_likes_table).where(
            post_likes_table.c.post_id == post_id,
            post_likes_table.c.liker_key == liker_key,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post_like(dict(row)) if row else None

    async def save(self, like: PostLike) -> PostLike:
        """Insert a like."""
        stmt = post_likes_table.insert().values(**post_like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete(self, like_id: PostLikeId) -> None:
        """Remove a like."""
        stmt = post_likes_table.delete().where(post_likes_table.c.id == like_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_post(self, post_id: PostId) -> int:
        """Remove every like of a post."""
        stmt = (
            post_likes_table.delete()
            .where(post_likes_table.c.post_id == post_id)
            .returning(post_likes_table.c.id)
        )
        result = await self.session.execute(stmt)
        removed = len(result.all())
        await self.session.flush()
        return removed

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        stmt = (
            select(func.count())
            .select_from(post_likes_table)
            .where(post_likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
