"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from dishka.integrations.fastapi import FastapiProvider
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alumni.application.usecase.admin import SeedSuperAdminUseCase
from alumni.config import Settings
from alumni.domain.error import DomainError
from alumni.interface.api.routes import (
    admin,
    auth,
    comments,
    events,
    health,
    posts,
    staff,
    users,
)
from alumni.interface.error import domain_error_handler
from alumni.util.di.container import create_container, setup_di
from alumni.util.error import ConfigurationError
from alumni.util.observability import instrument_fastapi

DEFAULT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_production_secrets(settings: Settings) -> None:
    """Refuse to run in production with the shipped default secrets.

    Raises:
        ConfigurationError: If a default secret is still in place
    """
    if settings.environment != "production":
        return

    if settings.auth.jwt_secret == DEFAULT_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET", "must be set in production")

    if (
        settings.bootstrap.seed_super_admin
        and settings.bootstrap.super_admin_password == DEFAULT_SECRET
    ):
        raise ConfigurationError(
            "BOOTSTRAP__SUPER_ADMIN_PASSWORD", "must be set in production"
        )


async def seed_super_admin(container: AsyncContainer) -> None:
    """Create the super admin account if it doesn't exist yet."""
    async with container() as request_container:
        use_case = await request_container.get(SeedSuperAdminUseCase)
        result = await use_case.execute()

    if result.created:
        logfire.info("Super admin created", username=result.account.username)
    else:
        logfire.info("Super admin present", username=result.account.username)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; tests pass one with mocked persistence

    Returns:
        Configured FastAPI application
    """
    settings = Settings()
    check_production_secrets(settings)

    if container is None:
        container = create_container(FastapiProvider())

    @asynccontextmanager
    async def lifespan(app_instance: FastAPI):
        if settings.bootstrap.seed_super_admin:
            await seed_super_admin(container)
        yield
        await container.close()

    app_instance = FastAPI(
        title="Alumni Community API",
        description="Backend API for the alumni community - posts, threaded discussions and admin approval",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)

    app_instance.add_exception_handler(DomainError, domain_error_handler)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(users.router)
    app_instance.include_router(events.router)
    app_instance.include_router(staff.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
