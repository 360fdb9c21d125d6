"""In-memory staff repository for testing."""

from typing import Optional

from alumni.domain.model.staff import StaffMember
from alumni.domain.repository.staff import StaffRepository
from alumni.domain.value import AccountId, StaffId

from .store import InMemoryStore


class InMemoryStaffRepository(StaffRepository):
    """In-memory implementation of StaffRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._staff = (store or InMemoryStore()).staff

    async def find_by_id(self, staff_id: StaffId) -> Optional[StaffMember]:
        """Find a staff entry by ID."""
        return self._staff.get(staff_id)

    async def find_by_user(self, user_id: AccountId) -> Optional[StaffMember]:
        """Find the staff entry linked to an account."""
        for staff in self._staff.values():
            if staff.user_id == user_id:
                return staff
        return None

    async def find_active(self) -> list[StaffMember]:
        """Find active staff entries ordered by position."""
        active = [s for s in self._staff.values() if s.is_active]
        return sorted(active, key=lambda s: s.position)

    async def save(self, staff: StaffMember) -> StaffMember:
        """Save or update a staff entry."""
        self._staff[staff.id] = staff
        return staff
