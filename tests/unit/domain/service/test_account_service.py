"""Unit tests for AccountService."""

from uuid import uuid4

import pytest

from alumni.domain.error import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
    ProtectedAccountError,
    ValidationError,
)
from alumni.domain.model import AccountProfile, ProfileUpdate
from alumni.domain.repository import AccountRepository
from alumni.domain.service import AccountService
from alumni.domain.value import (
    AccountId,
    AccountState,
    ApprovalStatus,
    Role,
    Username,
)
from tests.conftest import TEST_PASSWORD, make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def make_profile(username: str = "carol", email: str | None = None) -> AccountProfile:
    return AccountProfile(
        username=Username(username),
        email=email or f"{username}@example.org",
        password="a-long-password",
        first_name="Carol",
        last_name="Jones",
        graduation_year=2012,
    )


async def seed(unit_env, *accounts):
    repo = await unit_env.get(AccountRepository)
    for account in accounts:
        await repo.save(account)
    return repo


class TestRegisterAndAuthenticate:
    """Tests for registration and sign-in."""

    @pytest.mark.asyncio
    async def test_register_user_creates_approved_user(self, unit_env):
        """Self-registration yields a user that can sign in."""
        # Arrange
        service = await unit_env.get(AccountService)

        # Act
        account = await service.register_user(make_profile(email="Carol@Example.org"))

        # Assert
        assert account.role == Role.USER
        assert account.state == AccountState.USER_ACTIVE
        assert account.email == "carol@example.org"
        assert account.password_hash != "a-long-password"

    @pytest.mark.asyncio
    async def test_register_rejects_duplicate_email_and_username(self, unit_env):
        """Email and username must both be unique."""
        # Arrange
        service = await unit_env.get(AccountService)
        await service.register_user(make_profile())

        # Act & Assert
        with pytest.raises(ValidationError, match="Email"):
            await service.register_user(make_profile("carol2", "CAROL@example.org"))
        with pytest.raises(ValidationError, match="Username"):
            await service.register_user(make_profile("carol", "other@example.org"))

    @pytest.mark.asyncio
    async def test_authenticate_with_correct_password(self, unit_env):
        """Valid credentials return the account."""
        # Arrange
        service = await unit_env.get(AccountService)
        account = make_account("dave")
        await seed(unit_env, account)

        # Act
        result = await service.authenticate("DAVE@example.org", TEST_PASSWORD)

        # Assert
        assert result.id == account.id

    @pytest.mark.asyncio
    async def test_authenticate_wrong_password_or_unknown_email(self, unit_env):
        """Bad credentials raise AuthenticationError."""
        # Arrange
        service = await unit_env.get(AccountService)
        await seed(unit_env, make_account("dave"))

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await service.authenticate("dave@example.org", "wrong-password")
        with pytest.raises(AuthenticationError):
            await service.authenticate("nobody@example.org", TEST_PASSWORD)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "approval_status,is_active",
        [
            (ApprovalStatus.PENDING, True),
            (ApprovalStatus.REJECTED, True),
            (ApprovalStatus.APPROVED, False),
        ],
    )
    async def test_authenticate_refuses_unapproved_or_inactive_admin(
        self, unit_env, approval_status, is_active
    ):
        """Admins sign in only once approved and while active."""
        # Arrange
        service = await unit_env.get(AccountService)
        await seed(
            unit_env,
            make_account(
                "erin",
                role=Role.ADMIN,
                approval_status=approval_status,
                is_active=is_active,
            ),
        )

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await service.authenticate("erin@example.org", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_change_password(self, unit_env):
        """The new password works and the old one no longer does."""
        # Arrange
        service = await unit_env.get(AccountService)
        account = make_account("frank")
        await seed(unit_env, account)

        # Act
        await service.change_password(account.id, TEST_PASSWORD, "brand-new-secret")

        # Assert
        await service.authenticate("frank@example.org", "brand-new-secret")
        with pytest.raises(AuthenticationError):
            await service.authenticate("frank@example.org", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_change_password_requires_current_password(self, unit_env):
        """A wrong current password or a short new one is refused."""
        # Arrange
        service = await unit_env.get(AccountService)
        account = make_account("frank")
        await seed(unit_env, account)

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await service.change_password(account.id, "not-it", "brand-new-secret")
        with pytest.raises(ValidationError):
            await service.change_password(account.id, TEST_PASSWORD, "short")


class TestSeedSuperAdmin:
    """Tests for super admin bootstrap."""

    @pytest.mark.asyncio
    async def test_seed_creates_once(self, unit_env):
        """Seeding twice keeps the first super admin."""
        # Arrange
        service = await unit_env.get(AccountService)

        # Act
        first, created_first = await service.seed_super_admin(
            "superadmin", "root@example.org", "initial-password"
        )
        second, created_second = await service.seed_super_admin(
            "superadmin", "root@example.org", "initial-password"
        )

        # Assert
        assert created_first is True
        assert created_second is False
        assert first.id == second.id
        assert first.state == AccountState.SUPER_ADMIN
        assert first.can_sign_in


class TestAdminWorkflow:
    """Tests for admin creation and lifecycle transitions."""

    @pytest.mark.asyncio
    async def test_create_admin_starts_pending(self, unit_env):
        """A created admin waits for approval and cannot sign in."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        await seed(unit_env, root)

        # Act
        created = await service.create_admin(make_profile("gina"), root)

        # Assert
        assert created.state == AccountState.ADMIN_PENDING
        with pytest.raises(AuthenticationError):
            await service.authenticate("gina@example.org", "a-long-password")

    @pytest.mark.asyncio
    async def test_create_admin_requires_super_admin(self, unit_env):
        """Admins cannot create other admins."""
        # Arrange
        service = await unit_env.get(AccountService)
        actor = make_account("admin", role=Role.ADMIN)
        await seed(unit_env, actor)

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await service.create_admin(make_profile("gina"), actor)

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, unit_env):
        """Create, approve, deactivate, reactivate, reject then delete."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        repo = await seed(unit_env, root)
        admin = await service.create_admin(make_profile("hank"), root)

        # Act & Assert
        approved = await service.approve_admin(admin.id, root)
        assert approved.state == AccountState.ADMIN_APPROVED

        inactive = await service.deactivate_admin(admin.id, root)
        assert inactive.state == AccountState.ADMIN_INACTIVE

        reactivated = await service.reactivate_admin(admin.id, root)
        assert reactivated.state == AccountState.ADMIN_APPROVED

        rejected = await service.reject_admin(admin.id, root)
        assert rejected.state == AccountState.ADMIN_REJECTED

        await service.delete_admin(admin.id, root)
        assert await repo.find_by_id(admin.id) is None

    @pytest.mark.asyncio
    async def test_rejecting_approved_admin_revokes_approval(self, unit_env):
        """Approve then reject leaves the admin unapproved and unable to sign in."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        pending = make_account(
            "pending", role=Role.ADMIN, approval_status=ApprovalStatus.PENDING
        )
        repo = await seed(unit_env, root, pending)

        # Act
        approved = await service.approve_admin(pending.id, root)
        rejected = await service.reject_admin(pending.id, root)

        # Assert
        assert approved.is_approved is True
        assert rejected.is_approved is False
        assert rejected.can_sign_in is False
        stored = await repo.find_by_id(pending.id)
        assert stored.is_approved is False
        assert stored.approval_status == ApprovalStatus.REJECTED

    @pytest.mark.asyncio
    async def test_transitions_are_persisted(self, unit_env):
        """The stored account reflects the applied transition."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        member = make_account("ivan")
        repo = await seed(unit_env, root, member)

        # Act
        await service.elevate_to_admin(member.id, root)

        # Assert
        stored = await repo.find_by_id(member.id)
        assert stored.role == Role.ADMIN
        assert stored.approval_status == ApprovalStatus.PENDING

    @pytest.mark.asyncio
    async def test_admin_cannot_approve(self, unit_env):
        """Approval requires a super admin."""
        # Arrange
        service = await unit_env.get(AccountService)
        actor = make_account("admin", role=Role.ADMIN)
        pending = make_account(
            "pending", role=Role.ADMIN, approval_status=ApprovalStatus.PENDING
        )
        await seed(unit_env, actor, pending)

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await service.approve_admin(pending.id, actor)

    @pytest.mark.asyncio
    async def test_non_super_actor_refused_before_target_lookup(self, unit_env):
        """An unknown target still yields AuthorizationError for non-super actors."""
        # Arrange
        service = await unit_env.get(AccountService)
        actor = make_account("admin", role=Role.ADMIN)
        await seed(unit_env, actor)

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await service.delete_admin(AccountId(uuid4()), actor)

    @pytest.mark.asyncio
    async def test_unknown_target(self, unit_env):
        """Transitions on a missing account raise NotFoundError."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        await seed(unit_env, root)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.approve_admin(AccountId(uuid4()), root)

    @pytest.mark.asyncio
    async def test_super_admin_is_protected(self, unit_env):
        """Super admins cannot delete themselves."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        await seed(unit_env, root)

        # Act & Assert
        with pytest.raises(ProtectedAccountError):
            await service.delete_admin(root.id, root)

    @pytest.mark.asyncio
    async def test_cannot_delete_regular_user(self, unit_env):
        """Deletion only applies to admin accounts."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        member = make_account("member")
        await seed(unit_env, root, member)

        # Act & Assert
        with pytest.raises(InvalidTransitionError):
            await service.delete_admin(member.id, root)

    @pytest.mark.asyncio
    async def test_lost_race_raises_conflict(self, unit_env):
        """A concurrent change between read and write is detected."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        pending = make_account(
            "pending", role=Role.ADMIN, approval_status=ApprovalStatus.PENDING
        )
        repo = await seed(unit_env, root, pending)

        original_find = repo.find_by_id

        async def find_then_interfere(account_id):
            account = await original_find(account_id)
            if account_id == pending.id:
                # Another super admin rejects in between
                await repo.save(
                    account.model_copy(
                        update={"approval_status": ApprovalStatus.REJECTED}
                    )
                )
            return account

        repo.find_by_id = find_then_interfere

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.approve_admin(pending.id, root)

        repo.find_by_id = original_find
        stored = await repo.find_by_id(pending.id)
        assert stored.approval_status == ApprovalStatus.REJECTED


class TestListings:
    """Tests for capability-gated listings."""

    @pytest.mark.asyncio
    async def test_list_pending_admins(self, unit_env):
        """Only pending admins are listed, for super admins only."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        approved = make_account("approved", role=Role.ADMIN)
        pending = make_account(
            "pending", role=Role.ADMIN, approval_status=ApprovalStatus.PENDING
        )
        await seed(unit_env, root, approved, pending)

        # Act
        result = await service.list_pending_admins(root)

        # Assert
        assert [a.id for a in result] == [pending.id]
        with pytest.raises(AuthorizationError):
            await service.list_pending_admins(approved)
        assert await service.count_pending_admins() == 1

    @pytest.mark.asyncio
    async def test_list_accounts_requires_super_admin(self, unit_env):
        """Admins may list admins but not every account."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        admin = make_account("admin", role=Role.ADMIN)
        member = make_account("member")
        await seed(unit_env, root, admin, member)

        # Act
        admins = await service.list_admins(admin)
        everyone = await service.list_accounts(root)

        # Assert
        assert [a.id for a in admins] == [admin.id]
        assert len(everyone) == 3
        with pytest.raises(AuthorizationError):
            await service.list_accounts(admin)
        with pytest.raises(AuthorizationError):
            await service.list_admins(member)


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_owner_updates_own_profile(self, unit_env):
        """Only the set fields change and the email is normalized."""
        # Arrange
        service = await unit_env.get(AccountService)
        member = make_account("member")
        repo = await seed(unit_env, member)

        # Act
        updated = await service.update_profile(
            member.id,
            member,
            ProfileUpdate(email=" New@Example.org ", bio="Class of 2009"),
        )

        # Assert
        assert updated.email == "new@example.org"
        assert updated.bio == "Class of 2009"
        assert updated.first_name == member.first_name
        assert updated.role == Role.USER
        assert await repo.find_by_id(member.id) == updated

    @pytest.mark.asyncio
    async def test_optional_fields_can_be_cleared(self, unit_env):
        service = await unit_env.get(AccountService)
        member = make_account("member")
        await seed(unit_env, member)
        with_bio = await service.update_profile(
            member.id, member, ProfileUpdate(bio="Hello")
        )

        cleared = await service.update_profile(
            member.id, with_bio, ProfileUpdate(bio=None, first_name=None)
        )

        assert cleared.bio is None
        assert cleared.first_name == member.first_name

    @pytest.mark.asyncio
    async def test_admin_edits_member_but_not_super_admin(self, unit_env):
        """Admins hold EDIT_PROFILES; super admin profiles are protected."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        admin = make_account("admin", role=Role.ADMIN)
        member = make_account("member")
        await seed(unit_env, root, admin, member)

        # Act
        updated = await service.update_profile(
            member.id, admin, ProfileUpdate(last_name="Smith")
        )

        # Assert
        assert updated.last_name == "Smith"
        with pytest.raises(ProtectedAccountError):
            await service.update_profile(root.id, admin, ProfileUpdate(bio="x"))
        edited_by_root = await service.update_profile(
            root.id, root, ProfileUpdate(bio="Root")
        )
        assert edited_by_root.bio == "Root"

    @pytest.mark.asyncio
    async def test_member_cannot_edit_someone_else(self, unit_env):
        service = await unit_env.get(AccountService)
        member = make_account("member")
        other = make_account("other")
        await seed(unit_env, member, other)

        with pytest.raises(AuthorizationError):
            await service.update_profile(other.id, member, ProfileUpdate(bio="x"))

    @pytest.mark.asyncio
    async def test_taken_email_or_username_rejected(self, unit_env):
        """Uniqueness is checked against other accounts only."""
        # Arrange
        service = await unit_env.get(AccountService)
        member = make_account("member")
        other = make_account("other")
        await seed(unit_env, member, other)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.update_profile(
                member.id, member, ProfileUpdate(email="other@example.org")
            )
        with pytest.raises(ValidationError):
            await service.update_profile(
                member.id, member, ProfileUpdate(username=Username("other"))
            )
        same = await service.update_profile(
            member.id, member, ProfileUpdate(email="member@example.org")
        )
        assert same.email == "member@example.org"

    @pytest.mark.asyncio
    async def test_unknown_target(self, unit_env):
        service = await unit_env.get(AccountService)
        admin = make_account("admin", role=Role.ADMIN)

        with pytest.raises(NotFoundError):
            await service.update_profile(
                AccountId(uuid4()), admin, ProfileUpdate(bio="x")
            )


class TestCreateStaffAccount:
    """Tests for create_staff_account."""

    @pytest.mark.asyncio
    async def test_admin_creates_approved_user(self, unit_env):
        # Arrange
        service = await unit_env.get(AccountService)
        admin = make_account("admin", role=Role.ADMIN)
        await seed(unit_env, admin)

        # Act
        account = await service.create_staff_account(make_profile("teacher"), admin)

        # Assert
        assert account.role == Role.USER
        assert account.approval_status == ApprovalStatus.APPROVED
        assert account.can_sign_in is True

    @pytest.mark.asyncio
    async def test_staff_admin_needs_super_admin_and_starts_pending(self, unit_env):
        """Staff admins go through the usual approval workflow."""
        # Arrange
        service = await unit_env.get(AccountService)
        root = make_account("root", role=Role.SUPER_ADMIN)
        admin = make_account("admin", role=Role.ADMIN)
        await seed(unit_env, root, admin)

        # Act
        account = await service.create_staff_account(
            make_profile("head"), root, make_admin=True
        )

        # Assert
        assert account.role == Role.ADMIN
        assert account.approval_status == ApprovalStatus.PENDING
        with pytest.raises(AuthorizationError):
            await service.create_staff_account(
                make_profile("deputy"), admin, make_admin=True
            )

    @pytest.mark.asyncio
    async def test_member_cannot_create_staff(self, unit_env):
        service = await unit_env.get(AccountService)

        with pytest.raises(AuthorizationError):
            await service.create_staff_account(make_profile(), make_account("member"))
