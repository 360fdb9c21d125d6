"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from alumni.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from alumni.domain.service import JWTService
from alumni.interface.api.session import require_account_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing a profile. Omitted fields are left unchanged."""

    username: str | None = Field(default=None, min_length=3, max_length=50)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    graduation_year: int | None = Field(default=None, ge=1900, le=2200)
    bio: str | None = Field(default=None, max_length=2000)
    profile_image: str | None = None


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a member's public profile."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id)
    )


@router.put("/{user_id}", response_model=UpdateUserProfileResponse)
async def update_user_profile(
    user_id: str,
    request: UpdateProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserProfileResponse:
    """Edit a profile. Members edit their own; admins may edit others."""
    account_id = require_account_id(jwt_service, auth_token)
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=user_id,
            actor_id=account_id,
            **request.model_dump(exclude_unset=True),
        )
    )
