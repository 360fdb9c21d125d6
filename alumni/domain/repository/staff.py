"""Staff repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from alumni.domain.model.staff import StaffMember
from alumni.domain.value import AccountId, StaffId


class StaffRepository(ABC):
    """Repository for staff directory entries."""

    @abstractmethod
    async def find_by_id(self, staff_id: StaffId) -> Optional[StaffMember]:
        """Find a staff entry by ID, active or not."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: AccountId) -> Optional[StaffMember]:
        """Find the staff entry linked to an account."""
        pass

    @abstractmethod
    async def find_active(self) -> List[StaffMember]:
        """Find active staff entries ordered by position."""
        pass

    @abstractmethod
    async def save(self, staff: StaffMember) -> StaffMember:
        """Save a staff entry (create or update)."""
        pass
