"""Update user profile use case."""

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from alumni.application.usecase.common import AccountInfo, parse_id, resolve_actor
from alumni.domain.error import ValidationError
from alumni.domain.model import ProfileUpdate
from alumni.domain.service import AccountService
from alumni.domain.value import AccountId, Username


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Only fields present in the request are changed.
    """

    user_id: str
    actor_id: str  # From the session token
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    graduation_year: int | None = None
    bio: str | None = None
    profile_image: str | None = None

    def to_update(self) -> ProfileUpdate:
        """Build the domain update from the fields that were sent.

        Raises:
            ValidationError: If a field violates the account rules
        """
        fields = self.model_dump(
            include=self.model_fields_set - {"user_id", "actor_id"}
        )
        for name in ("username", "email", "first_name", "last_name"):
            if isinstance(fields.get(name), str):
                fields[name] = fields[name].strip()
        try:
            if fields.get("username") is not None:
                fields["username"] = Username(fields["username"])
            return ProfileUpdate(**fields)
        except PydanticValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise ValidationError(f"Invalid profile details: {messages}")


class UpdateUserProfileResponse(BaseModel):
    """Profile after the update."""

    account: AccountInfo


class UpdateUserProfileUseCase:
    """Use case for editing a member's profile."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize update profile use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Apply profile changes on behalf of the signed-in account.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            ValidationError: If the ID or a field is invalid, or the email
                or username is taken
            NotFoundError: If the account does not exist
            AuthorizationError: If the actor is neither the owner nor an admin
        """
        actor = await resolve_actor(self.account_service, request.actor_id)
        target_id = AccountId(parse_id(request.user_id, "account"))

        account = await self.account_service.update_profile(
            target_id, actor, request.to_update()
        )
        return UpdateUserProfileResponse(account=AccountInfo.from_account(account))
