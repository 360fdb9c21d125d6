"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Post
from alumni.domain.repository import PostRepository
from alumni.domain.value import AccountId, PostId, PostStatus
from alumni.persistence.mappers import post_to_dict, row_to_post
from alumni.persistence.tables import posts_table


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
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_all(
        self,
        status: Optional[PostStatus] = PostStatus.PUBLISHED,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first with filtering and pagination."""
        stmt = select(posts_table)

        if status is not None:
            stmt = stmt.where(posts_table.c.status == status.value)

        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    posts_table.c.title.ilike(pattern),
                    posts_table.c.content.ilike(pattern),
                    posts_table.c.excerpt.ilike(pattern),
                )
            )

        stmt = (
            stmt.order_by(posts_table.c.created_at.desc()).limit(limit).offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings()]

    async def find_by_author(self, author_id: AccountId) -> List[Post]:
        """Find posts written by an account, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(posts_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings()]

    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count posts, optionally only those created since a moment."""
        stmt = select(func.count()).select_from(posts_table)
        if created_since is not None:
            stmt = stmt.where(posts_table.c.created_at >= created_since)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        existing = await self.find_by_id(post.id)

        post_dict = post_to_dict(post)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Hard delete a post."""
        stmt = (
            posts_table.delete()
            .where(posts_table.c.id == post_id)
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted
