"""In-memory account repository for testing."""

from datetime import datetime
from typing import Optional

from alumni.domain.model.account import Account
from alumni.domain.repository.account import AccountRepository
from alumni.domain.value import AccountId, ApprovalStatus, Role, Username

from .store import InMemoryStore


def _same_guarded_fields(stored: Account, expected: Account) -> bool:
    return (
        stored.role == expected.role
        and stored.approval_status == expected.approval_status
        and stored.is_active == expected.is_active
        and stored.updated_at == expected.updated_at
    )


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()
        self._accounts = self._store.accounts

    def _newest_first(self, accounts: list[Account]) -> list[Account]:
        return sorted(accounts, key=lambda a: a.created_at, reverse=True)

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email address."""
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    async def find_by_username(self, username: Username) -> Optional[Account]:
        """Find an account by username."""
        for account in self._accounts.values():
            if account.username == username:
                return account
        return None

    async def find_by_role(
        self,
        role: Role,
        approval_status: Optional[ApprovalStatus] = None,
    ) -> list[Account]:
        """Find accounts with a role, newest first."""
        return self._newest_first(
            [
                a
                for a in self._accounts.values()
                if a.role == role
                and (approval_status is None or a.approval_status == approval_status)
            ]
        )

    async def find_all(self) -> list[Account]:
        """Find all accounts, newest first."""
        return self._newest_first(list(self._accounts.values()))

    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count accounts, optionally only those created since a moment."""
        return sum(
            1
            for a in self._accounts.values()
            if created_since is None or a.created_at >= created_since
        )

    async def save(self, account: Account) -> Account:
        """Save or update an account."""
        self._accounts[account.id] = account
        return account

    async def compare_and_swap(self, expected: Account, updated: Account) -> bool:
        """Replace an account only if it still matches ``expected``."""
        stored = self._accounts.get(expected.id)
        if stored is None or not _same_guarded_fields(stored, expected):
            return False
        self._accounts[expected.id] = updated
        return True

    async def delete_if_unchanged(self, expected: Account) -> bool:
        """Delete an account only if it still matches ``expected``.

        Cascades like the database: owned posts, registrations and staff
        entries are removed, comments and events lose their author.
        """
        stored = self._accounts.get(expected.id)
        if stored is None or not _same_guarded_fields(stored, expected):
            return False
        self._store.delete_account(expected.id)
        return True
