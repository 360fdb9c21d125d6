"""Get user profile use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import AccountInfo, parse_id
from alumni.domain.service import AccountService
from alumni.domain.value import AccountId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str


class GetUserProfileResponse(BaseModel):
    """Public profile of an account."""

    account: AccountInfo


class GetUserProfileUseCase:
    """Use case for viewing a member's profile."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Get an account's profile by ID.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the account does not exist
        """
        account_id = AccountId(parse_id(request.user_id, "account"))
        account = await self.account_service.get_by_id(account_id)
        return GetUserProfileResponse(account=AccountInfo.from_account(account))
