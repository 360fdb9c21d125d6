"""Staff directory routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from alumni.application.usecase.staff import (
    CreateStaffRequest,
    CreateStaffResponse,
    CreateStaffUseCase,
    DeleteStaffRequest,
    DeleteStaffUseCase,
    GetStaffRequest,
    GetStaffResponse,
    GetStaffUseCase,
    ListStaffRequest,
    ListStaffResponse,
    ListStaffUseCase,
    NewStaffAccount,
    StaffResponse,
    UpdateStaffRequest,
    UpdateStaffUseCase,
)
from alumni.domain.service import JWTService
from alumni.interface.api.session import require_account_id

router = APIRouter(prefix="/staff", tags=["staff"], route_class=DishkaRoute)


class CreateStaffAPIRequest(BaseModel):
    """API request for adding a staff member.

    Either reference an existing account or describe a new one.
    """

    existing_user_id: str | None = None
    new_user: NewStaffAccount | None = None
    make_admin: bool = False
    position: str = Field(min_length=1, max_length=200)
    department: str | None = Field(default=None, max_length=200)
    bio: str | None = Field(default=None, max_length=2000)
    phone_number: str | None = Field(default=None, max_length=50)
    office_location: str | None = Field(default=None, max_length=200)


class UpdateStaffAPIRequest(BaseModel):
    """API request for editing a staff entry. Omitted fields are left unchanged."""

    position: str | None = Field(default=None, min_length=1, max_length=200)
    department: str | None = Field(default=None, max_length=200)
    bio: str | None = Field(default=None, max_length=2000)
    phone_number: str | None = Field(default=None, max_length=50)
    office_location: str | None = Field(default=None, max_length=200)
    is_active: bool | None = None


@router.get("", response_model=ListStaffResponse)
async def list_staff(
    list_staff_use_case: FromDishka[ListStaffUseCase],
) -> ListStaffResponse:
    """List active staff with their account details."""
    return await list_staff_use_case.execute(ListStaffRequest())


@router.post(
    "", response_model=CreateStaffResponse, status_code=status.HTTP_201_CREATED
)
async def create_staff(
    request: CreateStaffAPIRequest,
    create_staff_use_case: FromDishka[CreateStaffUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateStaffResponse:
    """Add a staff member. Requires an admin.

    When a new account is created its generated password is returned once.
    """
    account_id = require_account_id(jwt_service, auth_token)
    return await create_staff_use_case.execute(
        CreateStaffRequest(actor_id=account_id, **request.model_dump())
    )


@router.get("/{staff_id}", response_model=GetStaffResponse)
async def get_staff(
    staff_id: str,
    get_staff_use_case: FromDishka[GetStaffUseCase],
) -> GetStaffResponse:
    """Get a staff entry."""
    return await get_staff_use_case.execute(GetStaffRequest(staff_id=staff_id))


@router.put("/{staff_id}", response_model=StaffResponse)
async def update_staff(
    staff_id: str,
    request: UpdateStaffAPIRequest,
    update_staff_use_case: FromDishka[UpdateStaffUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> StaffResponse:
    """Edit a staff entry. Requires an admin."""
    account_id = require_account_id(jwt_service, auth_token)
    return await update_staff_use_case.execute(
        UpdateStaffRequest(
            staff_id=staff_id,
            actor_id=account_id,
            changes=request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{staff_id}", response_model=StaffResponse)
async def delete_staff(
    staff_id: str,
    delete_staff_use_case: FromDishka[DeleteStaffUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> StaffResponse:
    """Remove a staff member from the directory. The account is kept."""
    account_id = require_account_id(jwt_service, auth_token)
    return await delete_staff_use_case.execute(
        DeleteStaffRequest(staff_id=staff_id, actor_id=account_id)
    )
