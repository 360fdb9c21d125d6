"""Admin approval workflow use cases.

Each use case applies one lifecycle transition to a target account on
behalf of the signed-in super admin.
"""

from abc import abstractmethod

from pydantic import BaseModel

from alumni.application.usecase.base import BaseUseCase
from alumni.application.usecase.common import AccountInfo, parse_id, resolve_actor
from alumni.domain.model import Account
from alumni.domain.service import AccountService
from alumni.domain.value import AccountId


class AccountTransitionRequest(BaseModel):
    """Request to change a target account's role or approval state."""

    target_id: str
    actor_id: str  # From the session token, never from the request body


class AccountTransitionResponse(BaseModel):
    """Account after the transition."""

    account: AccountInfo


class AccountTransitionUseCase(
    BaseUseCase[AccountTransitionRequest, AccountTransitionResponse]
):
    """Shared flow: resolve actor, parse target, apply one transition."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize transition use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    @abstractmethod
    async def apply(self, target_id: AccountId, actor: Account) -> Account:
        """Apply this use case's transition and return the updated account."""
        pass

    async def execute(
        self, request: AccountTransitionRequest
    ) -> AccountTransitionResponse:
        """Execute the transition.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            ValidationError: If the target ID is malformed
            AuthorizationError: If the actor is not a super admin
            ProtectedAccountError: If the target is a super admin or the actor
            NotFoundError: If the target does not exist
            InvalidTransitionError: If the target's state forbids the transition
            ConflictError: If the target changed concurrently
        """
        actor = await resolve_actor(self.account_service, request.actor_id)
        target_id = AccountId(parse_id(request.target_id, "account"))

        account = await self.apply(target_id, actor)
        return AccountTransitionResponse(account=AccountInfo.from_account(account))


class ApproveAdminUseCase(AccountTransitionUseCase):
    """Approve a pending or rejected admin."""

    async def apply(self, target_id: AccountId, actor: Account) -> Account:
        return await self.account_service.approve_admin(target_id, actor)


class RejectAdminUseCase(AccountTransitionUseCase):
    """Reject an admin."""

    async def apply(self, target_id: AccountId, actor: Account) -> Account:
        return await self.account_service.reject_admin(target_id, actor)


class DeactivateAdminUseCase(AccountTransitionUseCase):
    """Deactivate an approved admin."""

    async def apply(self, target_id: AccountId, actor: Account) -> Account:
        return await self.account_service.deactivate_admin(target_id, actor)


class ReactivateAdminUseCase(AccountTransitionUseCase):
    """Reactivate an inactive admin."""

    async def apply(self, target_id: AccountId, actor: Account) -> Account:
        return await self.account_service.reactivate_admin(target_id, actor)


class ElevateToAdminUseCase(AccountTransitionUseCase):
    """Turn a regular user into an admin awaiting approval."""

    async def apply(self, target_id: AccountId, actor: Account) -> Account:
        return await self.account_service.elevate_to_admin(target_id, actor)
