"""Delete admin use case."""

from pydantic import BaseModel

from alumni.application.usecase.base import BaseUseCase
from alumni.application.usecase.common import parse_id, resolve_actor
from alumni.domain.service import AccountService
from alumni.domain.value import AccountId


class DeleteAdminRequest(BaseModel):
    """Delete admin request."""

    target_id: str
    actor_id: str  # From the session token


class DeleteAdminResponse(BaseModel):
    """Delete admin response."""

    account_id: str
    deleted: bool


class DeleteAdminUseCase(BaseUseCase[DeleteAdminRequest, DeleteAdminResponse]):
    """Use case for hard deleting an admin account."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: DeleteAdminRequest) -> DeleteAdminResponse:
        """Delete the target admin.

        Raises the same errors as the other lifecycle transitions.
        """
        actor = await resolve_actor(self.account_service, request.actor_id)
        target_id = AccountId(parse_id(request.target_id, "account"))

        await self.account_service.delete_admin(target_id, actor)
        return DeleteAdminResponse(account_id=str(target_id), deleted=True)
