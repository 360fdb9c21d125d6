"""Staff directory entry.

Each entry links an account to its position at the school. Removing a
staff member only hides the entry.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import AccountId, StaffId


class StaffMember(DomainModel):
    """Staff directory entry for an account."""

    id: StaffId
    user_id: AccountId
    position: str = Field(min_length=1, max_length=200)
    department: Optional[str] = Field(default=None, max_length=200)
    bio: Optional[str] = Field(default=None, max_length=2000)
    phone_number: Optional[str] = Field(default=None, max_length=50)
    office_location: Optional[str] = Field(default=None, max_length=200)
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
