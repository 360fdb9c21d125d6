"""Account role and approval state machine.

Pure guard and transition functions. Persistence and the race check live in
``AccountService``; nothing here performs I/O.
"""

from datetime import datetime
from typing import Any

from alumni.domain.error import (
    AuthorizationError,
    InvalidTransitionError,
    ProtectedAccountError,
)
from alumni.domain.model import Account
from alumni.domain.value import AccountState, AccountTransition, ApprovalStatus, Role

ADMIN_STATES = frozenset(
    {
        AccountState.ADMIN_PENDING,
        AccountState.ADMIN_APPROVED,
        AccountState.ADMIN_REJECTED,
        AccountState.ADMIN_INACTIVE,
    }
)

# Legal source states per transition. CREATE_ADMIN has no source account.
TRANSITION_SOURCES: dict[AccountTransition, frozenset[AccountState]] = {
    AccountTransition.APPROVE: frozenset(
        {
            AccountState.ADMIN_PENDING,
            AccountState.ADMIN_REJECTED,
            AccountState.ADMIN_APPROVED,
        }
    ),
    AccountTransition.REJECT: frozenset(
        {
            AccountState.ADMIN_PENDING,
            AccountState.ADMIN_REJECTED,
            AccountState.ADMIN_APPROVED,
        }
    ),
    AccountTransition.DEACTIVATE: frozenset(
        {AccountState.ADMIN_APPROVED, AccountState.ADMIN_INACTIVE}
    ),
    AccountTransition.REACTIVATE: frozenset(
        {AccountState.ADMIN_INACTIVE, AccountState.ADMIN_APPROVED}
    ),
    AccountTransition.DELETE: ADMIN_STATES,
    AccountTransition.ELEVATE: frozenset({AccountState.USER_ACTIVE}),
}

# Field values written by each transition.
TRANSITION_EFFECTS: dict[AccountTransition, dict[str, Any]] = {
    AccountTransition.APPROVE: {"approval_status": ApprovalStatus.APPROVED},
    AccountTransition.REJECT: {"approval_status": ApprovalStatus.REJECTED},
    AccountTransition.DEACTIVATE: {"is_active": False},
    AccountTransition.REACTIVATE: {
        "is_active": True,
        "approval_status": ApprovalStatus.APPROVED,
    },
    AccountTransition.ELEVATE: {
        "role": Role.ADMIN,
        "approval_status": ApprovalStatus.PENDING,
        "is_active": True,
    },
}


def authorize_actor(actor: Account, transition: AccountTransition) -> None:
    """Check that the actor may trigger role transitions at all.

    Raises:
        AuthorizationError: If the actor is not an active, approved super admin
    """
    if actor.role != Role.SUPER_ADMIN or not actor.can_sign_in:
        raise AuthorizationError(
            f"Only an active super admin may {transition.value} accounts"
        )


def authorize_transition(
    actor: Account, target: Account, transition: AccountTransition
) -> None:
    """Run every guard for a transition on an existing account.

    Guards run in a fixed order: actor role, protected target, source state.

    Args:
        actor: Authenticated account requesting the transition
        target: Account the transition applies to
        transition: Requested transition

    Raises:
        AuthorizationError: If the actor is not an active super admin
        ProtectedAccountError: If the target is a super admin or the actor
        InvalidTransitionError: If the target's state is not a legal source
    """
    authorize_actor(actor, transition)

    if target.role == Role.SUPER_ADMIN:
        raise ProtectedAccountError(str(target.id), "super admin accounts")
    if target.id == actor.id:
        raise ProtectedAccountError(str(target.id), "cannot act on own account")

    state = target.state
    if state not in TRANSITION_SOURCES[transition]:
        raise InvalidTransitionError(transition.value, state.value)


def apply_transition(
    target: Account,
    transition: AccountTransition,
    now: datetime | None = None,
) -> Account:
    """Return the account as it is after a transition.

    Guards are not re-checked; call ``authorize_transition`` first. DELETE has
    no resulting account and is rejected here.

    Args:
        target: Account before the transition
        transition: Transition to apply
        now: Timestamp recorded as ``updated_at`` (defaults to the current time)

    Returns:
        New account instance with the transition's fields and ``updated_at`` set
    """
    if transition not in TRANSITION_EFFECTS:
        raise ValueError(f"{transition.value} does not produce an account")

    update = dict(TRANSITION_EFFECTS[transition])
    update["updated_at"] = now or datetime.now()
    return target.evolve(**update)
