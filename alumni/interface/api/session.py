"""Session cookie helpers shared by routes."""

from fastapi import HTTPException, Response, status

from alumni.config import Settings
from alumni.domain.service import JWTService

AUTH_COOKIE = "auth_token"


def require_account_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Account ID from the session cookie, or 401."""
    account_id = jwt_service.get_account_id_from_token(auth_token)
    if not account_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return account_id


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie."""
    is_production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        max_age=settings.auth.jwt_expiry_hours * 60 * 60,
        path="/",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Remove the session cookie."""
    is_production = settings.environment == "production"
    response.delete_cookie(
        key=AUTH_COOKIE,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
    )
