"""Seed super admin use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import AccountInfo
from alumni.config import BootstrapSettings
from alumni.domain.service import AccountService


class SeedSuperAdminResponse(BaseModel):
    """Seed super admin response."""

    account: AccountInfo
    created: bool


class SeedSuperAdminUseCase:
    """Use case for bootstrapping the platform's super admin account."""

    def __init__(
        self, account_service: AccountService, bootstrap: BootstrapSettings
    ) -> None:
        """Initialize seed super admin use case.

        Args:
            account_service: Account domain service
            bootstrap: Super admin credentials from configuration
        """
        self.account_service = account_service
        self.bootstrap = bootstrap

    async def execute(self) -> SeedSuperAdminResponse:
        """Create the super admin unless one exists. Safe to run repeatedly."""
        account, created = await self.account_service.seed_super_admin(
            username=self.bootstrap.super_admin_username,
            email=self.bootstrap.super_admin_email,
            password=self.bootstrap.super_admin_password,
        )
        return SeedSuperAdminResponse(
            account=AccountInfo.from_account(account), created=created
        )
