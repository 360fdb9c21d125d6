"""Get dashboard use case."""

from datetime import datetime, timedelta

import logfire
from pydantic import BaseModel

from alumni.application.usecase.common import AccountInfo, resolve_actor
from alumni.domain.error import AuthorizationError
from alumni.domain.service import AccountService, PostService
from alumni.domain.value import Capability, Role

NEW_ACCOUNTS_WINDOW = timedelta(days=30)
NEW_POSTS_WINDOW = timedelta(days=7)


class DashboardStats(BaseModel):
    """Platform counters."""

    total_users: int
    new_users_this_month: int
    total_posts: int
    new_posts_this_week: int
    pending_approvals: int


class GetDashboardRequest(BaseModel):
    """Get dashboard request."""

    actor_id: str  # From the session token


class GetDashboardResponse(BaseModel):
    """Dashboard view.

    Sections the actor has no capability for are None.
    """

    role: Role
    capabilities: list[Capability]
    stats: DashboardStats | None = None
    pending_admins: list[AccountInfo] | None = None
    admins: list[AccountInfo] | None = None
    accounts: list[AccountInfo] | None = None


class GetDashboardUseCase:
    """Use case composing the admin dashboard from capability-gated sections."""

    def __init__(
        self, account_service: AccountService, post_service: PostService
    ) -> None:
        """Initialize get dashboard use case.

        Args:
            account_service: Account domain service
            post_service: Post domain service
        """
        self.account_service = account_service
        self.post_service = post_service

    async def _stats(self, now: datetime) -> DashboardStats:
        return DashboardStats(
            total_users=await self.account_service.count_accounts(),
            new_users_this_month=await self.account_service.count_accounts(
                created_since=now - NEW_ACCOUNTS_WINDOW
            ),
            total_posts=await self.post_service.count_posts(),
            new_posts_this_week=await self.post_service.count_posts(
                created_since=now - NEW_POSTS_WINDOW
            ),
            pending_approvals=await self.account_service.count_pending_admins(),
        )

    async def execute(self, request: GetDashboardRequest) -> GetDashboardResponse:
        """Build the dashboard for the signed-in account.

        Raises:
            AuthorizationError: If the actor holds no dashboard capability
        """
        actor = await resolve_actor(self.account_service, request.actor_id)
        capabilities = actor.capabilities

        with logfire.span(
            "get_dashboard.execute", actor_id=str(actor.id), role=actor.role.value
        ):
            if not capabilities:
                logfire.warn("Dashboard denied", actor_id=str(actor.id))
                raise AuthorizationError("Admin access required")

            response = GetDashboardResponse(
                role=actor.role,
                capabilities=sorted(capabilities, key=lambda c: c.value),
            )

            if Capability.VIEW_STATS in capabilities:
                response.stats = await self._stats(datetime.now())

            if Capability.APPROVE_ADMINS in capabilities:
                pending = await self.account_service.list_pending_admins(actor)
                response.pending_admins = [AccountInfo.from_account(a) for a in pending]

            if Capability.MANAGE_ADMINS in capabilities:
                admins = await self.account_service.list_admins(actor)
                response.admins = [AccountInfo.from_account(a) for a in admins]

            if Capability.VIEW_ALL_ACCOUNTS in capabilities:
                accounts = await self.account_service.list_accounts(actor)
                response.accounts = [AccountInfo.from_account(a) for a in accounts]

            return response
