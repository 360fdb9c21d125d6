"""Create admin use case."""

from pydantic import BaseModel

from alumni.application.usecase.base import BaseUseCase
from alumni.application.usecase.common import (
    AccountInfo,
    ProfileFields,
    resolve_actor,
)
from alumni.domain.service import AccountService


class CreateAdminRequest(ProfileFields):
    """Create admin request."""

    actor_id: str  # From the session token


class CreateAdminResponse(BaseModel):
    """Create admin response."""

    account: AccountInfo


class CreateAdminUseCase(BaseUseCase[CreateAdminRequest, CreateAdminResponse]):
    """Use case for a super admin creating a new admin account."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: CreateAdminRequest) -> CreateAdminResponse:
        """Create an admin awaiting approval.

        Raises:
            AuthorizationError: If the actor is not a super admin
            ValidationError: If the profile is invalid or already taken
        """
        actor = await resolve_actor(self.account_service, request.actor_id)
        account = await self.account_service.create_admin(
            request.to_profile(), actor
        )
        return CreateAdminResponse(account=AccountInfo.from_account(account))
