"""Health check route."""

from datetime import datetime
from importlib.metadata import PackageNotFoundError, version

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from alumni.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


def package_version() -> str:
    try:
        return version("alumni-api")
    except PackageNotFoundError:
        return "unknown"


class HealthResponse(BaseModel):
    """Liveness and build information."""

    status: str
    timestamp: datetime
    environment: str
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving requests."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        environment=settings.environment,
        version=package_version(),
        git_sha=settings.git_sha,
    )
