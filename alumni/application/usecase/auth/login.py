"""Login use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import AccountInfo
from alumni.domain.service import AccountService, JWTService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    account: AccountInfo


class LoginUseCase:
    """Use case for signing in with email and password."""

    def __init__(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> None:
        """Initialize login use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT service for issuing session tokens
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a session token.

        Raises:
            AuthenticationError: If credentials are wrong or the account
                cannot sign in
        """
        account = await self.account_service.authenticate(
            request.email, request.password
        )
        token = self.jwt_service.create_token(str(account.id), account.username.root)
        return LoginResponse(token=token, account=AccountInfo.from_account(account))
