"""Domain value objects for the alumni platform.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from alumni.domain.value.common import RootValueObject


class Role(str, Enum):
    """Account role in the three-tier hierarchy."""

    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


class ApprovalStatus(str, Enum):
    """Approval status of an account.

    Only meaningful for admins. Users and super admins are always approved.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AccountState(str, Enum):
    """Lifecycle state derived from role, approval status and activity."""

    USER_ACTIVE = "user_active"
    ADMIN_PENDING = "admin_pending"
    ADMIN_APPROVED = "admin_approved"
    ADMIN_REJECTED = "admin_rejected"
    ADMIN_INACTIVE = "admin_inactive"
    SUPER_ADMIN = "super_admin"
    DELETED = "deleted"


class AccountTransition(str, Enum):
    """Role and approval transitions a super admin can trigger."""

    CREATE_ADMIN = "create_admin"
    APPROVE = "approve"
    REJECT = "reject"
    DEACTIVATE = "deactivate"
    REACTIVATE = "reactivate"
    DELETE = "delete"
    ELEVATE = "elevate"


class Capability(str, Enum):
    """Permission a role grants on the admin surface."""

    VIEW_STATS = "view_stats"
    MODERATE_CONTENT = "moderate_content"
    APPROVE_ADMINS = "approve_admins"
    MANAGE_ADMINS = "manage_admins"
    VIEW_ALL_ACCOUNTS = "view_all_accounts"
    MANAGE_EVENTS = "manage_events"
    MANAGE_STAFF = "manage_staff"
    EDIT_PROFILES = "edit_profiles"


ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.USER: frozenset(),
    Role.ADMIN: frozenset(
        {
            Capability.VIEW_STATS,
            Capability.MODERATE_CONTENT,
            Capability.MANAGE_EVENTS,
            Capability.MANAGE_STAFF,
            Capability.EDIT_PROFILES,
        }
    ),
    Role.SUPER_ADMIN: frozenset(Capability),
}


class PostStatus(str, Enum):
    """Publication status of a blog post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class EventStatus(str, Enum):
    """Lifecycle status of a community event."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Username(RootValueObject[str]):
    """Unique account username.

    3-50 characters: letters, digits, dots, hyphens and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9._-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters of letters, digits, '.', '-' or '_'"
            )
        return v
