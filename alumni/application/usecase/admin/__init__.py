"""Admin use cases."""

from .create_admin import CreateAdminRequest, CreateAdminResponse, CreateAdminUseCase
from .delete_admin import DeleteAdminRequest, DeleteAdminResponse, DeleteAdminUseCase
from .get_dashboard import (
    DashboardStats,
    GetDashboardRequest,
    GetDashboardResponse,
    GetDashboardUseCase,
)
from .list_accounts import (
    ListAccountsRequest,
    ListAccountsResponse,
    ListAdminsUseCase,
    ListAllAccountsUseCase,
    ListPendingAdminsUseCase,
)
from .seed_super_admin import SeedSuperAdminResponse, SeedSuperAdminUseCase
from .transition_admin import (
    AccountTransitionRequest,
    AccountTransitionResponse,
    ApproveAdminUseCase,
    DeactivateAdminUseCase,
    ElevateToAdminUseCase,
    ReactivateAdminUseCase,
    RejectAdminUseCase,
)

__all__ = [
    "AccountTransitionRequest",
    "AccountTransitionResponse",
    "ApproveAdminUseCase",
    "CreateAdminRequest",
    "CreateAdminResponse",
    "CreateAdminUseCase",
    "DashboardStats",
    "DeactivateAdminUseCase",
    "DeleteAdminRequest",
    "DeleteAdminResponse",
    "DeleteAdminUseCase",
    "ElevateToAdminUseCase",
    "GetDashboardRequest",
    "GetDashboardResponse",
    "GetDashboardUseCase",
    "ListAccountsRequest",
    "ListAccountsResponse",
    "ListAdminsUseCase",
    "ListAllAccountsUseCase",
    "ListPendingAdminsUseCase",
    "ReactivateAdminUseCase",
    "RejectAdminUseCase",
    "SeedSuperAdminResponse",
    "SeedSuperAdminUseCase",
]
