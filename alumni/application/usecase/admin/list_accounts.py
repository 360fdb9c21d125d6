"""Account listing use cases for the admin surface."""

from pydantic import BaseModel

from alumni.application.usecase.common import AccountInfo, resolve_actor
from alumni.domain.service import AccountService


class ListAccountsRequest(BaseModel):
    """Request carrying only the acting account."""

    actor_id: str  # From the session token


class ListAccountsResponse(BaseModel):
    """Accounts, newest first."""

    accounts: list[AccountInfo]
    total: int


def _to_response(accounts) -> ListAccountsResponse:
    items = [AccountInfo.from_account(account) for account in accounts]
    return ListAccountsResponse(accounts=items, total=len(items))


class ListPendingAdminsUseCase:
    """Admins awaiting approval (super admin only)."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: ListAccountsRequest) -> ListAccountsResponse:
        actor = await resolve_actor(self.account_service, request.actor_id)
        return _to_response(await self.account_service.list_pending_admins(actor))


class ListAdminsUseCase:
    """Every admin account (admins and super admins)."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: ListAccountsRequest) -> ListAccountsResponse:
        actor = await resolve_actor(self.account_service, request.actor_id)
        return _to_response(await self.account_service.list_admins(actor))


class ListAllAccountsUseCase:
    """Every account on the platform (super admin only)."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: ListAccountsRequest) -> ListAccountsResponse:
        actor = await resolve_actor(self.account_service, request.actor_id)
        return _to_response(await self.account_service.list_accounts(actor))
