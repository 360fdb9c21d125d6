"""PostgreSQL implementation of Staff repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import StaffMember
from alumni.domain.repository import StaffRepository
from alumni.domain.value import AccountId, StaffId
from alumni.persistence.mappers import row_to_staff, staff_to_dict
from alumni.persistence.tables import staff_table


class PostgresStaffRepository(StaffRepository):
    """PostgreSQL implementation of StaffRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, staff_id: StaffId) -> Optional[StaffMember]:
        """Find a staff entry by ID."""
        stmt = select(staff_table).where(staff_table.c.id == staff_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_staff(dict(row)) if row else None

    async def find_by_user(self, user_id: AccountId) -> Optional[StaffMember]:
        """Find the staff entry linked to an account."""
        stmt = select(staff_table).where(staff_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_staff(dict(row)) if row else None

    async def find_active(self) -> List[StaffMember]:
        """Find active staff entries ordered by position."""
        stmt = (
            select(staff_table)
            .where(staff_table.c.is_active.is_(True))
            .order_by(staff_table.c.position.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_staff(dict(row)) for row in result.mappings()]

    async def save(self, staff: StaffMember) -> StaffMember:
        """Save a staff entry (create or update)."""
        existing = await self.find_by_id(staff.id)

        staff_dict = staff_to_dict(staff)

        if existing:
            stmt = (
                staff_table.update()
                .where(staff_table.c.id == staff.id)
                .values(**staff_dict)
            )
        else:
            stmt = staff_table.insert().values(**staff_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return staff
