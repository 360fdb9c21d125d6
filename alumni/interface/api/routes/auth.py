"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel, Field

from alumni.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    GetCurrentAccountRequest,
    GetCurrentAccountResponse,
    GetCurrentAccountUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from alumni.application.usecase.common import AccountInfo
from alumni.config import Settings
from alumni.domain.error import AuthenticationError
from alumni.domain.service import JWTService
from alumni.interface.api.session import (
    clear_session_cookie,
    require_account_id,
    set_session_cookie,
)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """API request for signing in."""

    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=128)


class LoginAPIResponse(BaseModel):
    """Signed-in account. The token itself travels in the cookie."""

    account: AccountInfo


class LogoutResponse(BaseModel):
    """Response for logout."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Authentication status (never errors for anonymous callers)."""

    authenticated: bool
    current: GetCurrentAccountResponse | None = None


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing password."""

    current_password: str
    new_password: str = Field(min_length=8, max_length=128)


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Register a new alumni account.

    Self-registered accounts are regular users and may sign in right away.
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Sign in with email and password.

    Sets cookie: auth_token
    """
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
    set_session_cookie(response, result.token, settings)
    return LoginAPIResponse(account=result.account)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Sign out by clearing the session cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_account(
    get_current_account_use_case: FromDishka[GetCurrentAccountUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current account if authenticated, or return unauthenticated status.

    Safe to call without a session: returns ``authenticated=false`` instead
    of an error. Role and capabilities are read fresh from storage.
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        current = await get_current_account_use_case.execute(
            GetCurrentAccountRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, current=current)
    except AuthenticationError:
        return AuthStatusResponse(authenticated=False)


@router.post("/change-password", response_model=ChangePasswordResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ChangePasswordResponse:
    """Change the signed-in account's password."""
    account_id = require_account_id(jwt_service, auth_token)
    return await change_password_use_case.execute(
        ChangePasswordRequest(
            account_id=account_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )
