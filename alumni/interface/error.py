"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import Request, status
from fastapi.responses import JSONResponse

from alumni.domain.error import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)

# Checked in order, subclasses before their bases
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def status_for_error(error: DomainError) -> int:
    """HTTP status code for a domain error (400 for unlisted business rules)."""
    for error_type, code in ERROR_STATUS:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as a JSON ``detail`` response."""
    code = status_for_error(exc)
    logfire.info(
        "Domain error returned",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=code,
    )
    return JSONResponse(
        status_code=code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )
