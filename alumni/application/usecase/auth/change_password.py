"""Change password use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import resolve_actor
from alumni.domain.service import AccountService


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    account_id: str  # From the session token
    current_password: str
    new_password: str


class ChangePasswordResponse(BaseModel):
    """Change password response."""

    success: bool


class ChangePasswordUseCase:
    """Use case for changing the signed-in account's password."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: ChangePasswordRequest) -> ChangePasswordResponse:
        account = await resolve_actor(self.account_service, request.account_id)
        await self.account_service.change_password(
            account.id, request.current_password, request.new_password
        )
        return ChangePasswordResponse(success=True)
