"""Staff directory management use cases for admins."""

from typing import Any

import logfire
from pydantic import BaseModel, Field

from alumni.application.usecase.common import (
    ProfileFields,
    parse_id,
    resolve_actor,
)
from alumni.domain.error import ValidationError
from alumni.domain.service import (
    AccountService,
    StaffService,
    generate_staff_password,
)
from alumni.domain.value import AccountId, StaffId

from .list_staff import StaffInfo, staff_info


class NewStaffAccount(BaseModel):
    """Details for an account created together with its staff entry."""

    username: str
    email: str
    first_name: str
    last_name: str


class CreateStaffRequest(BaseModel):
    """Create staff request.

    Exactly one of ``existing_user_id`` and ``new_user`` must be given.
    """

    actor_id: str  # From the session token
    existing_user_id: str | None = None
    new_user: NewStaffAccount | None = None
    make_admin: bool = False
    position: str
    department: str | None = None
    bio: str | None = None
    phone_number: str | None = None
    office_location: str | None = None


class CreateStaffResponse(BaseModel):
    """Create staff response.

    ``default_password`` is only set when a new account was created.
    """

    staff: StaffInfo
    default_password: str | None = None


class UpdateStaffRequest(BaseModel):
    """Update staff request."""

    staff_id: str
    actor_id: str  # From the session token
    changes: dict[str, Any] = Field(default_factory=dict)


class StaffResponse(BaseModel):
    """Staff entry after the change."""

    staff: StaffInfo


class DeleteStaffRequest(BaseModel):
    """Delete staff request."""

    staff_id: str
    actor_id: str  # From the session token


class CreateStaffUseCase:
    """Use case for adding someone to the staff directory."""

    def __init__(
        self, staff_service: StaffService, account_service: AccountService
    ) -> None:
        """Initialize create staff use case.

        Args:
            staff_service: Staff domain service
            account_service: Account domain service
        """
        self.staff_service = staff_service
        self.account_service = account_service

    async def execute(self, request: CreateStaffRequest) -> CreateStaffResponse:
        """List an existing account as staff, or create the account first.

        Steps:
        1. Resolve the actor and check staff management rights
        2. Load the existing account, or create one with a generated password
        3. Create the staff entry

        Raises:
            AuthenticationError: If the session account can no longer sign in
            AuthorizationError: If the actor may not manage staff or create
                the requested admin
            ValidationError: If neither or both account sources are given,
                the email or username is taken, or a field is invalid
            NotFoundError: If the existing account does not exist
        """
        actor = await resolve_actor(self.account_service, request.actor_id)
        self.staff_service.ensure_can_manage(actor)

        if (request.existing_user_id is None) == (request.new_user is None):
            raise ValidationError(
                "Either select an existing user or provide new user details"
            )

        with logfire.span("create_staff.execute", actor_id=str(actor.id)):
            default_password = None
            if request.existing_user_id is not None:
                member = await self.account_service.get_by_id(
                    AccountId(parse_id(request.existing_user_id, "account"))
                )
            else:
                default_password = generate_staff_password()
                profile = ProfileFields(
                    **request.new_user.model_dump(), password=default_password
                ).to_profile()
                member = await self.account_service.create_staff_account(
                    profile, actor, make_admin=request.make_admin
                )

            staff = await self.staff_service.create_staff(
                actor,
                member,
                position=request.position.strip(),
                department=request.department,
                bio=request.bio,
                phone_number=request.phone_number,
                office_location=request.office_location,
            )
            return CreateStaffResponse(
                staff=await staff_info(self.account_service, staff),
                default_password=default_password,
            )


class UpdateStaffUseCase:
    """Use case for editing a staff entry."""

    def __init__(
        self, staff_service: StaffService, account_service: AccountService
    ) -> None:
        self.staff_service = staff_service
        self.account_service = account_service

    async def execute(self, request: UpdateStaffRequest) -> StaffResponse:
        """Apply the provided fields to a staff entry.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            AuthorizationError: If the actor may not manage staff
            NotFoundError: If the entry does not exist
            ValidationError: If a field is invalid
        """
        staff_id = StaffId(parse_id(request.staff_id, "staff"))
        actor = await resolve_actor(self.account_service, request.actor_id)

        staff = await self.staff_service.update_staff(
            staff_id, actor, request.changes
        )
        return StaffResponse(staff=await staff_info(self.account_service, staff))


class DeleteStaffUseCase:
    """Use case for removing someone from the staff directory."""

    def __init__(
        self, staff_service: StaffService, account_service: AccountService
    ) -> None:
        self.staff_service = staff_service
        self.account_service = account_service

    async def execute(self, request: DeleteStaffRequest) -> StaffResponse:
        """Hide a staff entry; the account stays.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            AuthorizationError: If the actor may not manage staff
            NotFoundError: If the entry does not exist
        """
        staff_id = StaffId(parse_id(request.staff_id, "staff"))
        actor = await resolve_actor(self.account_service, request.actor_id)

        staff = await self.staff_service.remove_staff(staff_id, actor)
        return StaffResponse(staff=await staff_info(self.account_service, staff))
