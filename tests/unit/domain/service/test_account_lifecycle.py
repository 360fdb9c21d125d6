"""Unit tests for the account role and approval state machine."""

from datetime import datetime

import pytest

from alumni.domain.error import (
    AuthorizationError,
    InvalidTransitionError,
    ProtectedAccountError,
)
from alumni.domain.service.account_lifecycle import (
    TRANSITION_SOURCES,
    apply_transition,
    authorize_actor,
    authorize_transition,
)
from alumni.domain.value import (
    AccountState,
    AccountTransition,
    ApprovalStatus,
    Capability,
    Role,
)
from tests.conftest import make_account


def super_admin():
    return make_account("root", role=Role.SUPER_ADMIN)


def admin(approval_status=ApprovalStatus.APPROVED, is_active=True, username="admin"):
    return make_account(
        username, role=Role.ADMIN, approval_status=approval_status, is_active=is_active
    )


class TestAccountState:
    """Tests for the derived lifecycle state."""

    @pytest.mark.parametrize(
        "approval_status,is_active,expected",
        [
            (ApprovalStatus.PENDING, True, AccountState.ADMIN_PENDING),
            (ApprovalStatus.APPROVED, True, AccountState.ADMIN_APPROVED),
            (ApprovalStatus.REJECTED, True, AccountState.ADMIN_REJECTED),
            (ApprovalStatus.APPROVED, False, AccountState.ADMIN_INACTIVE),
            (ApprovalStatus.PENDING, False, AccountState.ADMIN_INACTIVE),
        ],
    )
    def test_admin_states(self, approval_status, is_active, expected):
        """Admin state follows approval status unless inactive."""
        assert admin(approval_status, is_active).state == expected

    def test_user_and_super_admin_states(self):
        """Users and super admins have fixed states."""
        assert make_account().state == AccountState.USER_ACTIVE
        assert super_admin().state == AccountState.SUPER_ADMIN

    def test_only_approved_active_accounts_can_sign_in(self):
        """Pending, rejected and inactive admins cannot sign in."""
        assert admin().can_sign_in
        assert not admin(ApprovalStatus.PENDING).can_sign_in
        assert not admin(ApprovalStatus.REJECTED).can_sign_in
        assert not admin(is_active=False).can_sign_in

    def test_capabilities_follow_role(self):
        """Super admins hold every capability, admins a subset, users none."""
        assert super_admin().capabilities == frozenset(Capability)
        assert admin().capabilities == {
            Capability.VIEW_STATS,
            Capability.MODERATE_CONTENT,
            Capability.MANAGE_EVENTS,
            Capability.MANAGE_STAFF,
            Capability.EDIT_PROFILES,
        }
        assert make_account().capabilities == frozenset()

    def test_capabilities_empty_when_cannot_sign_in(self):
        """A pending admin holds no capabilities yet."""
        assert admin(ApprovalStatus.PENDING).capabilities == frozenset()


class TestAuthorizeTransition:
    """Tests for transition guards."""

    @pytest.mark.parametrize(
        "actor",
        [
            make_account("member"),
            admin(),
            make_account("lapsed", role=Role.SUPER_ADMIN, is_active=False),
        ],
        ids=["user", "admin", "inactive-super-admin"],
    )
    def test_actor_must_be_active_super_admin(self, actor):
        """Anyone but an active super admin is refused."""
        with pytest.raises(AuthorizationError):
            authorize_transition(
                actor, admin(ApprovalStatus.PENDING), AccountTransition.APPROVE
            )

    def test_actor_check_runs_before_target_checks(self):
        """A non-super actor gets AuthorizationError even for protected targets."""
        with pytest.raises(AuthorizationError) as exc_info:
            authorize_transition(admin(), super_admin(), AccountTransition.DELETE)
        assert not isinstance(exc_info.value, ProtectedAccountError)

    def test_super_admin_target_is_protected(self):
        """No transition may touch a super admin account."""
        actor = super_admin()
        other = make_account("other-root", role=Role.SUPER_ADMIN)

        for transition in TRANSITION_SOURCES:
            with pytest.raises(ProtectedAccountError):
                authorize_transition(actor, other, transition)

    def test_actor_cannot_target_itself(self):
        """The acting account is protected from its own transitions."""
        actor = super_admin()
        with pytest.raises(ProtectedAccountError):
            authorize_transition(actor, actor, AccountTransition.DEACTIVATE)

    @pytest.mark.parametrize(
        "transition,target_factory",
        [
            (AccountTransition.APPROVE, lambda: make_account("member")),
            (AccountTransition.APPROVE, lambda: admin(is_active=False)),
            (AccountTransition.REJECT, lambda: admin(is_active=False)),
            (AccountTransition.DEACTIVATE, lambda: admin(ApprovalStatus.PENDING)),
            (AccountTransition.DEACTIVATE, lambda: admin(ApprovalStatus.REJECTED)),
            (AccountTransition.REACTIVATE, lambda: admin(ApprovalStatus.PENDING)),
            (AccountTransition.DELETE, lambda: make_account("member")),
            (AccountTransition.ELEVATE, lambda: admin()),
        ],
    )
    def test_illegal_source_state(self, transition, target_factory):
        """Transitions from states outside their source set are rejected."""
        with pytest.raises(InvalidTransitionError) as exc_info:
            authorize_transition(super_admin(), target_factory(), transition)
        assert exc_info.value.transition == transition.value

    @pytest.mark.parametrize(
        "transition,target_factory",
        [
            (AccountTransition.APPROVE, lambda: admin(ApprovalStatus.PENDING)),
            (AccountTransition.APPROVE, lambda: admin(ApprovalStatus.REJECTED)),
            (AccountTransition.APPROVE, lambda: admin()),
            (AccountTransition.REJECT, lambda: admin(ApprovalStatus.PENDING)),
            (AccountTransition.REJECT, lambda: admin()),
            (AccountTransition.DEACTIVATE, lambda: admin()),
            (AccountTransition.REACTIVATE, lambda: admin(is_active=False)),
            (AccountTransition.DELETE, lambda: admin(ApprovalStatus.REJECTED)),
            (AccountTransition.DELETE, lambda: admin(is_active=False)),
            (AccountTransition.ELEVATE, lambda: make_account("member")),
        ],
    )
    def test_legal_source_state(self, transition, target_factory):
        """Transitions from their source states pass every guard."""
        authorize_transition(super_admin(), target_factory(), transition)

    def test_authorize_actor_alone(self):
        """Creating an admin only needs the actor check."""
        authorize_actor(super_admin(), AccountTransition.CREATE_ADMIN)
        with pytest.raises(AuthorizationError):
            authorize_actor(admin(), AccountTransition.CREATE_ADMIN)


class TestApplyTransition:
    """Tests for transition effects."""

    def test_approve_sets_approved(self):
        """Approving a pending admin lets it sign in."""
        result = apply_transition(
            admin(ApprovalStatus.PENDING), AccountTransition.APPROVE
        )
        assert result.state == AccountState.ADMIN_APPROVED
        assert result.can_sign_in

    def test_reject_sets_rejected(self):
        """Rejecting an approved admin revokes sign-in."""
        result = apply_transition(admin(), AccountTransition.REJECT)
        assert result.approval_status == ApprovalStatus.REJECTED
        assert not result.can_sign_in

    def test_deactivate_keeps_approval(self):
        """Deactivation only clears the activity flag."""
        result = apply_transition(admin(), AccountTransition.DEACTIVATE)
        assert result.state == AccountState.ADMIN_INACTIVE
        assert result.approval_status == ApprovalStatus.APPROVED

    def test_reactivate_leaves_active_and_approved(self):
        """Reactivation always ends approved, whatever the prior approval."""
        target = admin(ApprovalStatus.REJECTED, is_active=False)
        result = apply_transition(target, AccountTransition.REACTIVATE)
        assert result.is_active
        assert result.approval_status == ApprovalStatus.APPROVED

    def test_elevate_makes_pending_admin(self):
        """Elevated users must still be approved before signing in."""
        result = apply_transition(make_account(), AccountTransition.ELEVATE)
        assert result.role == Role.ADMIN
        assert result.state == AccountState.ADMIN_PENDING
        assert not result.can_sign_in

    def test_sets_updated_at_and_keeps_identity(self):
        """The new account keeps id and profile, with a fresh updated_at."""
        target = admin(ApprovalStatus.PENDING)
        now = datetime(2030, 1, 1)

        result = apply_transition(target, AccountTransition.APPROVE, now=now)

        assert result.updated_at == now
        assert result.id == target.id
        assert result.username == target.username
        assert target.approval_status == ApprovalStatus.PENDING

    def test_delete_has_no_resulting_account(self):
        """DELETE cannot be applied as an update."""
        with pytest.raises(ValueError):
            apply_transition(admin(), AccountTransition.DELETE)
