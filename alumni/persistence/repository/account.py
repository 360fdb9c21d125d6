"""PostgreSQL implementation of Account repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.model import Account
from alumni.domain.repository import AccountRepository
from alumni.domain.value import AccountId, ApprovalStatus, Role, Username
from alumni.persistence.mappers import account_to_dict, row_to_account
from alumni.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, condition) -> Optional[Account]:
        stmt = select(accounts_table).where(condition)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return await self._find_one(accounts_table.c.id == account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email address."""
        return await self._find_one(accounts_table.c.email == email)

    async def find_by_username(self, username: Username) -> Optional[Account]:
        """Find an account by username."""
        return await self._find_one(accounts_table.c.username == username.root)

    async def find_by_role(
        self,
        role: Role,
        approval_status: Optional[ApprovalStatus] = None,
    ) -> List[Account]:
        """Find accounts with a role, newest first."""
        stmt = select(accounts_table).where(accounts_table.c.role == role.value)
        if approval_status is not None:
            stmt = stmt.where(
                accounts_table.c.approval_status == approval_status.value
            )
        stmt = stmt.order_by(accounts_table.c.created_at.desc())

        result = await self.session.execute(stmt)
        return [row_to_account(dict(row)) for row in result.mappings()]

    async def find_all(self) -> List[Account]:
        """Find all accounts, newest first."""
        stmt = select(accounts_table).order_by(accounts_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_account(dict(row)) for row in result.mappings()]

    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count accounts, optionally only those created since a moment."""
        stmt = select(func.count()).select_from(accounts_table)
        if created_since is not None:
            stmt = stmt.where(accounts_table.c.created_at >= created_since)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, account: Account) -> Account:
        """Save an account (create or unconditional update)."""
        existing = await self.find_by_id(account.id)

        account_dict = account_to_dict(account)

        if existing:
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(**account_dict)
            )
        else:
            stmt = accounts_table.insert().values(**account_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return account

    def _unchanged(self, expected: Account):
        """Match the stored row against the fields the guards looked at."""
        return and_(
            accounts_table.c.id == expected.id,
            accounts_table.c.role == expected.role.value,
            accounts_table.c.approval_status == expected.approval_status.value,
            accounts_table.c.is_active == expected.is_active,
            accounts_table.c.updated_at == expected.updated_at,
        )

    async def compare_and_swap(self, expected: Account, updated: Account) -> bool:
        """Replace an account only if it still matches ``expected``."""
        stmt = (
            accounts_table.update()
            .where(self._unchanged(expected))
            .values(**account_to_dict(updated))
            .returning(accounts_table.c.id)
        )
        result = await self.session.execute(stmt)
        applied = result.first() is not None
        await self.session.flush()
        return applied

    async def delete_if_unchanged(self, expected: Account) -> bool:
        """Hard delete an account only if it still matches ``expected``."""
        stmt = (
            accounts_table.delete()
            .where(self._unchanged(expected))
            .returning(accounts_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted
