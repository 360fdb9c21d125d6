"""Helpers shared by use cases."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from alumni.domain.error import AuthenticationError, NotFoundError, ValidationError
from alumni.domain.model import Account, AccountProfile
from alumni.domain.service import AccountService
from alumni.domain.value import AccountId, AccountState, ApprovalStatus, Role, Username


def parse_id(value: str, resource: str) -> UUID:
    """Parse a UUID from request input.

    Raises:
        ValidationError: If the value is not a valid UUID
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(f"Invalid {resource} ID: {value!r}")


async def resolve_actor(account_service: AccountService, actor_id: str) -> Account:
    """Load the signed-in account named by a session token.

    The role is always read from storage, never from the token or request.

    Raises:
        AuthenticationError: If the account is gone or can no longer sign in
    """
    try:
        account = await account_service.get_by_id(
            AccountId(parse_id(actor_id, "account"))
        )
    except (NotFoundError, ValidationError):
        logfire.warn("Session refers to unknown account", actor_id=actor_id)
        raise AuthenticationError("Session is no longer valid")

    if not account.can_sign_in:
        logfire.warn(
            "Session refused for inactive account",
            actor_id=actor_id,
            state=account.state.value,
        )
        raise AuthenticationError("Account is not active or not yet approved")
    return account


class AccountInfo(BaseModel):
    """Public account details (never includes the password hash)."""

    account_id: str
    username: str
    email: str
    first_name: str
    last_name: str
    graduation_year: int | None
    bio: str | None
    profile_image: str | None
    role: Role
    approval_status: ApprovalStatus
    is_approved: bool
    is_active: bool
    state: AccountState
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "AccountInfo":
        return cls(
            account_id=str(account.id),
            username=account.username.root,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            graduation_year=account.graduation_year,
            bio=account.bio,
            profile_image=account.profile_image,
            role=account.role,
            approval_status=account.approval_status,
            is_approved=account.is_approved,
            is_active=account.is_active,
            state=account.state,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class ProfileFields(BaseModel):
    """Profile fields accepted when creating an account."""

    username: str
    email: str
    password: str
    first_name: str
    last_name: str
    graduation_year: int | None = None
    bio: str | None = None

    def to_profile(self) -> AccountProfile:
        """Build the domain profile.

        Raises:
            ValidationError: If a field violates the account rules
        """
        try:
            return AccountProfile(
                username=Username(self.username.strip()),
                email=self.email,
                password=self.password,
                first_name=self.first_name.strip(),
                last_name=self.last_name.strip(),
                graduation_year=self.graduation_year,
                bio=self.bio,
            )
        except PydanticValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise ValidationError(f"Invalid account details: {messages}")
