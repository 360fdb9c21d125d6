"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Comment
from alumni.domain.repository import CommentRepository
from alumni.domain.value import CommentId, PostId
from alumni.persistence.mappers import comment_to_dict, row_to_comment
from alumni.persistence.tables import comments_table


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
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments of a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment together with all of its nested replies."""
        subtree = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .cte(name="subtree", recursive=True)
        )
        subtree = subtree.union_all(
            select(comments_table.c.id).where(
                comments_table.c.parent_id == subtree.c.id
            )
        )

        stmt = (
            comments_table.delete()
            .where(comments_table.c.id.in_(select(subtree.c.id)))
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        removed = len(result.all())
        await self.session.flush()
        return removed

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        stmt = (
            comments_table.delete()
            .where(comments_table.c.post_id == post_id)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        removed = len(result.all())
        await self.session.flush()
        return removed

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count(self) -> int:
        """Count all comments."""
        stmt = select(func.count()).select_from(comments_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()
