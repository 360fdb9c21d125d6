"""Get current account use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import AccountInfo, resolve_actor
from alumni.domain.error import AuthenticationError
from alumni.domain.service import AccountService, JWTService
from alumni.domain.value import Capability
from alumni.util.jwt import JWTError


class GetCurrentAccountRequest(BaseModel):
    """Get current account request."""

    token: str  # JWT token


class GetCurrentAccountResponse(BaseModel):
    """Get current account response."""

    account: AccountInfo
    capabilities: list[Capability]


class GetCurrentAccountUseCase:
    """Use case for resolving the signed-in account from its session token."""

    def __init__(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> None:
        """Initialize get current account use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT service for decoding session tokens
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(
        self, request: GetCurrentAccountRequest
    ) -> GetCurrentAccountResponse:
        """Resolve the account and its current capabilities.

        Raises:
            AuthenticationError: If the token is invalid or the account can
                no longer sign in
        """
        try:
            payload = self.jwt_service.verify_token(request.token)
        except JWTError as e:
            raise AuthenticationError(str(e))

        account = await resolve_actor(self.account_service, payload.account_id)
        return GetCurrentAccountResponse(
            account=AccountInfo.from_account(account),
            capabilities=sorted(account.capabilities, key=lambda c: c.value),
        )
