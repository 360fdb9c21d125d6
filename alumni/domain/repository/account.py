"""Account repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from alumni.domain.model.account import Account
from alumni.domain.value import AccountId, ApprovalStatus, Role, Username


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Defines the contract for account persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email address."""
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Account]:
        """Find an account by username."""
        pass

    @abstractmethod
    async def find_by_role(
        self,
        role: Role,
        approval_status: Optional[ApprovalStatus] = None,
    ) -> List[Account]:
        """Find accounts with a role, newest first.

        Args:
            role: Role to filter by
            approval_status: Optional approval status filter

        Returns:
            Matching accounts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Account]:
        """Find all accounts, newest first."""
        pass

    @abstractmethod
    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count accounts, optionally only those created since a moment."""
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or unconditional update).

        Args:
            account: The account to save

        Returns:
            The saved account
        """
        pass

    @abstractmethod
    async def compare_and_swap(self, expected: Account, updated: Account) -> bool:
        """Replace an account only if it still matches ``expected``.

        The stored role, approval status, activity flag and ``updated_at``
        must equal those of ``expected`` for the write to happen.

        Args:
            expected: The account as read before the transition
            updated: The account after the transition

        Returns:
            True if the update was applied, False if the stored account changed
        """
        pass

    @abstractmethod
    async def delete_if_unchanged(self, expected: Account) -> bool:
        """Hard delete an account only if it still matches ``expected``.

        Returns:
            True if the account was deleted, False if it changed or vanished
        """
        pass
