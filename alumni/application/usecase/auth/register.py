"""Register account use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import AccountInfo, ProfileFields
from alumni.domain.service import AccountService


class RegisterRequest(ProfileFields):
    """Register request."""


class RegisterResponse(BaseModel):
    """Register response."""

    account: AccountInfo


class RegisterUseCase:
    """Use case for alumni self-registration."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize register use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Register a regular user account.

        Raises:
            ValidationError: If profile fields are invalid or already taken
        """
        account = await self.account_service.register_user(request.to_profile())
        return RegisterResponse(account=AccountInfo.from_account(account))
