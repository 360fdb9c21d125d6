"""Account domain service."""

import secrets
from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from alumni.config import AuthSettings
from alumni.domain.error import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
    ProtectedAccountError,
    ValidationError,
)
from alumni.domain.model import Account, AccountProfile, ProfileUpdate
from alumni.domain.repository import AccountRepository
from alumni.domain.value import (
    AccountId,
    AccountTransition,
    ApprovalStatus,
    Capability,
    Role,
    Username,
)
from alumni.util.password import hash_password, verify_password

from .account_lifecycle import apply_transition, authorize_actor, authorize_transition
from .base import Service

MIN_PASSWORD_LENGTH = 8


def normalize_email(email: str) -> str:
    """Emails are matched case-insensitively."""
    return email.strip().lower()


class AccountService(Service):
    """Domain service for accounts, sign-in and the admin approval workflow."""

    def __init__(
        self,
        account_repository: AccountRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            auth_settings: Authentication settings (password hashing cost)
        """
        self.account_repository = account_repository
        self.auth_settings = auth_settings

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def _ensure_unique(self, profile: AccountProfile) -> None:
        """Reject a profile whose email or username is already taken."""
        email = normalize_email(profile.email)
        if await self.account_repository.find_by_email(email):
            logfire.warn("Email already registered", email=email)
            raise ValidationError("Email already registered")
        if await self.account_repository.find_by_username(profile.username):
            logfire.warn("Username already taken", username=profile.username.root)
            raise ValidationError("Username already taken")

    def _new_account(
        self, profile: AccountProfile, role: Role, approval_status: ApprovalStatus
    ) -> Account:
        now = datetime.now()
        return Account(
            id=AccountId(uuid4()),
            username=profile.username,
            email=normalize_email(profile.email),
            password_hash=hash_password(profile.password, self.auth_settings),
            first_name=profile.first_name,
            last_name=profile.last_name,
            graduation_year=profile.graduation_year,
            bio=profile.bio,
            role=role,
            approval_status=approval_status,
            is_active=True,
            created_at=now,
            updated_at=now,
        )

    async def register_user(self, profile: AccountProfile) -> Account:
        """Register a regular alumni account.

        Self-registration always produces a ``user`` that can sign in
        immediately. Admins are created or elevated by a super admin.

        Args:
            profile: Profile details with the plain text password

        Returns:
            Created account

        Raises:
            ValidationError: If the email or username is already taken
        """
        with logfire.span(
            "account_service.register_user", username=profile.username.root
        ):
            await self._ensure_unique(profile)

            account = self._new_account(profile, Role.USER, ApprovalStatus.APPROVED)
            saved = await self.account_repository.save(account)
            logfire.info(
                "Account registered",
                account_id=str(saved.id),
                username=saved.username.root,
            )
            return saved

    async def authenticate(self, email: str, password: str) -> Account:
        """Check sign-in credentials.

        Args:
            email: Account email
            password: Plain text password

        Returns:
            The authenticated account

        Raises:
            AuthenticationError: If credentials are wrong or the account is
                inactive or not approved
        """
        email = normalize_email(email)
        with logfire.span("account_service.authenticate", email=email):
            account = await self.account_repository.find_by_email(email)
            if not account or not verify_password(password, account.password_hash):
                logfire.warn("Sign-in failed: bad credentials", email=email)
                raise AuthenticationError("Invalid email or password")

            if not account.can_sign_in:
                logfire.warn(
                    "Sign-in refused",
                    account_id=str(account.id),
                    state=account.state.value,
                )
                raise AuthenticationError("Account is not active or not yet approved")

            logfire.info("Sign-in succeeded", account_id=str(account.id))
            return account

    async def change_password(
        self, account_id: AccountId, current_password: str, new_password: str
    ) -> Account:
        """Replace an account's password after verifying the current one.

        Raises:
            NotFoundError: If the account does not exist
            AuthenticationError: If the current password is wrong
            ValidationError: If the new password is too short
        """
        with logfire.span(
            "account_service.change_password", account_id=str(account_id)
        ):
            account = await self.get_by_id(account_id)

            if not verify_password(current_password, account.password_hash):
                logfire.warn("Password change refused", account_id=str(account_id))
                raise AuthenticationError("Current password is incorrect")
            if len(new_password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                )

            updated = account.evolve(
                password_hash=hash_password(new_password, self.auth_settings),
                updated_at=datetime.now(),
            )
            saved = await self.account_repository.save(updated)
            logfire.info("Password changed", account_id=str(account_id))
            return saved

    async def seed_super_admin(
        self, username: str, email: str, password: str
    ) -> tuple[Account, bool]:
        """Create the super admin account unless one already exists.

        Args:
            username: Super admin username
            email: Super admin email
            password: Initial plain text password

        Returns:
            Tuple of (super admin account, whether it was created now)

        Raises:
            ValidationError: If the email or username belongs to another account
        """
        with logfire.span("account_service.seed_super_admin", username=username):
            existing = await self.account_repository.find_by_role(Role.SUPER_ADMIN)
            if existing:
                logfire.info(
                    "Super admin already present", account_id=str(existing[0].id)
                )
                return existing[0], False

            profile = AccountProfile(
                username=Username(username),
                email=email,
                password=password,
                first_name="Super",
                last_name="Admin",
            )
            await self._ensure_unique(profile)

            account = self._new_account(
                profile, Role.SUPER_ADMIN, ApprovalStatus.APPROVED
            )
            saved = await self.account_repository.save(account)
            logfire.info("Super admin created", account_id=str(saved.id))
            return saved, True

    async def create_admin(self, profile: AccountProfile, actor: Account) -> Account:
        """Create a new admin account awaiting approval.

        Args:
            profile: Profile details with the plain text password
            actor: Authenticated account performing the operation

        Returns:
            Created admin in the pending state

        Raises:
            AuthorizationError: If the actor is not an active super admin
            ValidationError: If the email or username is already taken
        """
        with logfire.span(
            "account_service.create_admin",
            actor_id=str(actor.id),
            username=profile.username.root,
        ):
            try:
                authorize_actor(actor, AccountTransition.CREATE_ADMIN)
            except AuthorizationError:
                logfire.warn("Admin creation denied", actor_id=str(actor.id))
                raise

            await self._ensure_unique(profile)

            account = self._new_account(profile, Role.ADMIN, ApprovalStatus.PENDING)
            saved = await self.account_repository.save(account)
            logfire.info(
                "Admin created",
                account_id=str(saved.id),
                actor_id=str(actor.id),
                approval_status=saved.approval_status.value,
            )
            return saved

    async def _load_authorized_target(
        self, target_id: AccountId, actor: Account, transition: AccountTransition
    ) -> Account:
        """Run every transition guard and return the target as read."""
        try:
            authorize_actor(actor, transition)
            target = await self.get_by_id(target_id)
            authorize_transition(actor, target, transition)
        except (AuthorizationError, InvalidTransitionError) as e:
            logfire.warn(
                "Account transition refused",
                transition=transition.value,
                target_id=str(target_id),
                actor_id=str(actor.id),
                error=str(e),
            )
            raise
        return target

    async def _transition(
        self, target_id: AccountId, actor: Account, transition: AccountTransition
    ) -> Account:
        """Apply a transition and persist it with a compare-and-swap write."""
        with logfire.span(
            f"account_service.{transition.value}",
            target_id=str(target_id),
            actor_id=str(actor.id),
        ):
            target = await self._load_authorized_target(target_id, actor, transition)

            updated = apply_transition(target, transition)
            if not await self.account_repository.compare_and_swap(target, updated):
                logfire.warn(
                    "Account changed concurrently",
                    transition=transition.value,
                    target_id=str(target_id),
                )
                raise ConflictError("Account", str(target_id))

            logfire.info(
                "Account transition applied",
                transition=transition.value,
                target_id=str(target_id),
                actor_id=str(actor.id),
                from_state=target.state.value,
                to_state=updated.state.value,
            )
            return updated

    async def approve_admin(self, target_id: AccountId, actor: Account) -> Account:
        """Approve an admin so they can sign in.

        Raises:
            AuthorizationError: If the actor is not an active super admin
            ProtectedAccountError: If the target is a super admin or the actor
            NotFoundError: If the target does not exist
            InvalidTransitionError: If the target is not a pending, rejected
                or approved admin
            ConflictError: If the target changed since it was read
        """
        return await self._transition(target_id, actor, AccountTransition.APPROVE)

    async def reject_admin(self, target_id: AccountId, actor: Account) -> Account:
        """Reject an admin. Rejected admins cannot sign in.

        Raises the same errors as ``approve_admin``.
        """
        return await self._transition(target_id, actor, AccountTransition.REJECT)

    async def deactivate_admin(self, target_id: AccountId, actor: Account) -> Account:
        """Deactivate an approved admin without deleting the account."""
        return await self._transition(target_id, actor, AccountTransition.DEACTIVATE)

    async def reactivate_admin(self, target_id: AccountId, actor: Account) -> Account:
        """Reactivate an admin, leaving it active and approved."""
        return await self._transition(target_id, actor, AccountTransition.REACTIVATE)

    async def elevate_to_admin(self, target_id: AccountId, actor: Account) -> Account:
        """Turn a regular user into an admin awaiting approval."""
        return await self._transition(target_id, actor, AccountTransition.ELEVATE)

    async def delete_admin(self, target_id: AccountId, actor: Account) -> None:
        """Hard delete an admin account.

        Args:
            target_id: Admin to delete
            actor: Authenticated account performing the operation

        Raises:
            AuthorizationError: If the actor is not an active super admin
            ProtectedAccountError: If the target is a super admin or the actor
            NotFoundError: If the target does not exist
            InvalidTransitionError: If the target is not an admin
            ConflictError: If the target changed since it was read
        """
        transition = AccountTransition.DELETE
        with logfire.span(
            "account_service.delete_admin",
            target_id=str(target_id),
            actor_id=str(actor.id),
        ):
            target = await self._load_authorized_target(target_id, actor, transition)

            if not await self.account_repository.delete_if_unchanged(target):
                logfire.warn("Account changed concurrently", target_id=str(target_id))
                raise ConflictError("Account", str(target_id))

            logfire.info(
                "Admin deleted",
                target_id=str(target_id),
                actor_id=str(actor.id),
                from_state=target.state.value,
            )

    def _require_capability(self, actor: Account, capability: Capability) -> None:
        if not actor.has_capability(capability):
            logfire.warn(
                "Capability missing",
                actor_id=str(actor.id),
                capability=capability.value,
            )
            raise AuthorizationError(f"Missing permission: {capability.value}")

    async def list_pending_admins(self, actor: Account) -> list[Account]:
        """List admins awaiting approval, newest first.

        Raises:
            AuthorizationError: If the actor cannot approve admins
        """
        with logfire.span(
            "account_service.list_pending_admins", actor_id=str(actor.id)
        ):
            self._require_capability(actor, Capability.APPROVE_ADMINS)
            accounts = await self.account_repository.find_by_role(
                Role.ADMIN, ApprovalStatus.PENDING
            )
            logfire.info("Pending admins listed", count=len(accounts))
            return accounts

    async def list_admins(self, actor: Account) -> list[Account]:
        """List every admin account, newest first.

        Raises:
            AuthorizationError: If the actor is not a signed-in admin or super admin
        """
        with logfire.span("account_service.list_admins", actor_id=str(actor.id)):
            if not actor.can_sign_in or actor.role == Role.USER:
                logfire.warn("Admin listing denied", actor_id=str(actor.id))
                raise AuthorizationError("Admin access required")
            accounts = await self.account_repository.find_by_role(Role.ADMIN)
            logfire.info("Admins listed", count=len(accounts))
            return accounts

    async def list_accounts(self, actor: Account) -> list[Account]:
        """List every account on the platform, newest first.

        Raises:
            AuthorizationError: If the actor cannot view all accounts
        """
        with logfire.span("account_service.list_accounts", actor_id=str(actor.id)):
            self._require_capability(actor, Capability.VIEW_ALL_ACCOUNTS)
            accounts = await self.account_repository.find_all()
            logfire.info("Accounts listed", count=len(accounts))
            return accounts

    async def count_accounts(self, created_since: datetime | None = None) -> int:
        """Count accounts, optionally only those created since a moment."""
        return await self.account_repository.count(created_since)

    async def count_pending_admins(self) -> int:
        """Count admins awaiting approval."""
        pending = await self.account_repository.find_by_role(
            Role.ADMIN, ApprovalStatus.PENDING
        )
        return len(pending)

    async def update_profile(
        self, target_id: AccountId, actor: Account, update: ProfileUpdate
    ) -> Account:
        """Change an account's profile details.

        Owners edit their own profile; admins may edit any profile except a
        super admin's. Role and approval fields are never touched here.

        Args:
            target_id: Account whose profile changes
            actor: Authenticated account performing the update
            update: Fields to change

        Returns:
            Updated account

        Raises:
            NotFoundError: If the target does not exist
            AuthorizationError: If the actor may not edit the target
            ValidationError: If the new email or username is taken or invalid
            ConflictError: If the target changed concurrently
        """
        with logfire.span(
            "account_service.update_profile",
            target_id=str(target_id),
            actor_id=str(actor.id),
        ):
            target = await self.get_by_id(target_id)
            self._ensure_can_edit_profile(target, actor)

            changes = update.changes()
            if "email" in changes:
                changes["email"] = normalize_email(changes["email"])
                owner = await self.account_repository.find_by_email(changes["email"])
                if owner and owner.id != target.id:
                    logfire.warn("Email already registered", email=changes["email"])
                    raise ValidationError("Email already registered")
            if "username" in changes:
                owner = await self.account_repository.find_by_username(
                    changes["username"]
                )
                if owner and owner.id != target.id:
                    logfire.warn(
                        "Username already taken", username=changes["username"].root
                    )
                    raise ValidationError("Username already taken")

            try:
                updated = target.evolve(**changes, updated_at=datetime.now())
            except PydanticValidationError as e:
                messages = "; ".join(err["msg"] for err in e.errors())
                raise ValidationError(f"Invalid profile details: {messages}")

            if not await self.account_repository.compare_and_swap(target, updated):
                logfire.warn("Profile update lost a race", target_id=str(target_id))
                raise ConflictError("Account", str(target_id))

            logfire.info(
                "Profile updated",
                target_id=str(target_id),
                actor_id=str(actor.id),
                fields=sorted(changes),
            )
            return updated

    def _ensure_can_edit_profile(self, target: Account, actor: Account) -> None:
        if actor.id == target.id and actor.can_sign_in:
            return
        if target.role == Role.SUPER_ADMIN and actor.role != Role.SUPER_ADMIN:
            logfire.warn(
                "Profile edit refused",
                target_id=str(target.id),
                actor_id=str(actor.id),
            )
            raise ProtectedAccountError(str(target.id), "super admin profile")
        if not actor.has_capability(Capability.EDIT_PROFILES):
            logfire.warn(
                "Profile edit refused",
                target_id=str(target.id),
                actor_id=str(actor.id),
            )
            raise AuthorizationError("Not authorized to update this profile")

    async def create_staff_account(
        self, profile: AccountProfile, actor: Account, make_admin: bool = False
    ) -> Account:
        """Create the account behind a new staff directory entry.

        Staff who should administer the site become admins awaiting
        approval, which needs a super admin. Everyone else is a regular,
        approved user.

        Raises:
            AuthorizationError: If the actor may not manage staff, or may not
                create admins when ``make_admin`` is set
            ValidationError: If the email or username is already taken
        """
        if make_admin:
            return await self.create_admin(profile, actor)

        with logfire.span(
            "account_service.create_staff_account",
            actor_id=str(actor.id),
            username=profile.username.root,
        ):
            self._require_capability(actor, Capability.MANAGE_STAFF)
            await self._ensure_unique(profile)

            account = self._new_account(profile, Role.USER, ApprovalStatus.APPROVED)
            saved = await self.account_repository.save(account)
            logfire.info(
                "Staff account created",
                account_id=str(saved.id),
                actor_id=str(actor.id),
            )
            return saved


def generate_staff_password() -> str:
    """Random initial password handed to the admin who created the account."""
    return f"Staff-{secrets.token_urlsafe(9)}"
