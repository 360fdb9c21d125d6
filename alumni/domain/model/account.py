"""Account aggregate root.

Accounts belong to alumni (role ``user``), content administrators (``admin``)
and the platform owner (``super_admin``). Admin accounts go through a
super-admin approval workflow before they can sign in.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, computed_field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import (
    ROLE_CAPABILITIES,
    AccountId,
    AccountState,
    ApprovalStatus,
    Capability,
    Role,
    Username,
)


class Account(DomainModel):
    """Account aggregate root.

    The lifecycle state is never stored directly; it is derived from
    ``role``, ``approval_status`` and ``is_active`` (see ``state``).
    """

    id: AccountId
    username: Username
    email: str = Field(min_length=3, max_length=255)
    password_hash: str = Field(repr=False)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    graduation_year: Optional[int] = Field(default=None, ge=1900, le=2200)
    bio: Optional[str] = Field(default=None, max_length=2000)
    profile_image: Optional[str] = None
    role: Role = Role.USER
    approval_status: ApprovalStatus = ApprovalStatus.APPROVED
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_approved(self) -> bool:
        """Whether the account has been approved."""
        return self.approval_status == ApprovalStatus.APPROVED

    @property
    def state(self) -> AccountState:
        """Lifecycle state derived from role, approval and activity flags."""
        if self.role == Role.SUPER_ADMIN:
            return AccountState.SUPER_ADMIN
        if self.role == Role.USER:
            return AccountState.USER_ACTIVE
        if not self.is_active:
            return AccountState.ADMIN_INACTIVE
        return {
            ApprovalStatus.PENDING: AccountState.ADMIN_PENDING,
            ApprovalStatus.APPROVED: AccountState.ADMIN_APPROVED,
            ApprovalStatus.REJECTED: AccountState.ADMIN_REJECTED,
        }[self.approval_status]

    @property
    def can_sign_in(self) -> bool:
        """Only active, approved accounts may authenticate."""
        return self.is_active and self.is_approved

    @property
    def capabilities(self) -> frozenset[Capability]:
        """Capabilities granted by the account's role."""
        if not self.can_sign_in:
            return frozenset()
        return ROLE_CAPABILITIES[self.role]

    def has_capability(self, capability: Capability) -> bool:
        """Check whether the account holds a capability."""
        return capability in self.capabilities

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class AccountProfile(DomainModel):
    """Profile details supplied when an account is created.

    Holds the plain text password until it is hashed by ``AccountService``.
    """

    username: Username
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=8, max_length=128, repr=False)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    graduation_year: Optional[int] = Field(default=None, ge=1900, le=2200)
    bio: Optional[str] = Field(default=None, max_length=2000)


class ProfileUpdate(DomainModel):
    """Profile fields an owner or an admin may change.

    Only fields that were explicitly set are applied. Optional profile
    details can be cleared by setting them to None.
    """

    username: Optional[Username] = None
    email: Optional[str] = Field(default=None, min_length=3, max_length=255)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    graduation_year: Optional[int] = Field(default=None, ge=1900, le=2200)
    bio: Optional[str] = Field(default=None, max_length=2000)
    profile_image: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        """Explicitly set fields, skipping None for required account fields."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None or name in CLEARABLE_PROFILE_FIELDS
        }


CLEARABLE_PROFILE_FIELDS = frozenset({"graduation_year", "bio", "profile_image"})
