"""Staff directory read use cases."""

from datetime import datetime

from pydantic import BaseModel

from alumni.application.usecase.common import parse_id
from alumni.domain.model import Account, StaffMember
from alumni.domain.service import AccountService, StaffService
from alumni.domain.value import StaffId


class StaffUserInfo(BaseModel):
    """The account behind a staff entry, as shown in the directory."""

    account_id: str
    username: str
    email: str
    first_name: str
    last_name: str
    profile_image: str | None

    @classmethod
    def from_account(cls, account: Account) -> "StaffUserInfo":
        return cls(
            account_id=str(account.id),
            username=account.username.root,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            profile_image=account.profile_image,
        )


class StaffInfo(BaseModel):
    """Staff entry details in responses."""

    staff_id: str
    user: StaffUserInfo
    position: str
    department: str | None
    bio: str | None
    phone_number: str | None
    office_location: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_staff(cls, staff: StaffMember, account: Account) -> "StaffInfo":
        return cls(
            staff_id=str(staff.id),
            user=StaffUserInfo.from_account(account),
            position=staff.position,
            department=staff.department,
            bio=staff.bio,
            phone_number=staff.phone_number,
            office_location=staff.office_location,
            is_active=staff.is_active,
            created_at=staff.created_at,
            updated_at=staff.updated_at,
        )


async def staff_info(account_service: AccountService, staff: StaffMember) -> StaffInfo:
    """Join a staff entry with its account."""
    account = await account_service.get_by_id(staff.user_id)
    return StaffInfo.from_staff(staff, account)


class ListStaffRequest(BaseModel):
    """List staff request."""


class ListStaffResponse(BaseModel):
    """Active staff, ordered by position."""

    staff: list[StaffInfo]


class ListStaffUseCase:
    """Use case for the public staff directory."""

    def __init__(
        self, staff_service: StaffService, account_service: AccountService
    ) -> None:
        self.staff_service = staff_service
        self.account_service = account_service

    async def execute(self, request: ListStaffRequest) -> ListStaffResponse:
        """List active staff with their account details."""
        return ListStaffResponse(
            staff=[
                await staff_info(self.account_service, staff)
                for staff in await self.staff_service.list_active()
            ]
        )


class GetStaffRequest(BaseModel):
    """Get staff request."""

    staff_id: str


class GetStaffResponse(BaseModel):
    """Get staff response."""

    staff: StaffInfo


class GetStaffUseCase:
    """Use case for reading one staff entry."""

    def __init__(
        self, staff_service: StaffService, account_service: AccountService
    ) -> None:
        self.staff_service = staff_service
        self.account_service = account_service

    async def execute(self, request: GetStaffRequest) -> GetStaffResponse:
        """Get a staff entry by ID, active or not.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the entry does not exist
        """
        staff_id = StaffId(parse_id(request.staff_id, "staff"))
        staff = await self.staff_service.get_staff(staff_id)
        return GetStaffResponse(staff=await staff_info(self.account_service, staff))
