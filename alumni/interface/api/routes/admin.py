"""Admin routes: approval workflow, account listings and dashboard."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from alumni.application.usecase.admin import (
    AccountTransitionRequest,
    AccountTransitionResponse,
    ApproveAdminUseCase,
    CreateAdminRequest,
    CreateAdminResponse,
    CreateAdminUseCase,
    DeactivateAdminUseCase,
    DeleteAdminRequest,
    DeleteAdminResponse,
    DeleteAdminUseCase,
    ElevateToAdminUseCase,
    GetDashboardRequest,
    GetDashboardResponse,
    GetDashboardUseCase,
    ListAccountsRequest,
    ListAccountsResponse,
    ListAdminsUseCase,
    ListAllAccountsUseCase,
    ListPendingAdminsUseCase,
    ReactivateAdminUseCase,
    RejectAdminUseCase,
)
from alumni.application.usecase.common import ProfileFields
from alumni.domain.service import JWTService
from alumni.interface.api.session import require_account_id

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/dashboard", response_model=GetDashboardResponse)
async def get_dashboard(
    get_dashboard_use_case: FromDishka[GetDashboardUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetDashboardResponse:
    """Dashboard sections available to the signed-in admin."""
    account_id = require_account_id(jwt_service, auth_token)
    return await get_dashboard_use_case.execute(
        GetDashboardRequest(actor_id=account_id)
    )


@router.get("/pending", response_model=ListAccountsResponse)
async def list_pending_admins(
    list_pending_admins_use_case: FromDishka[ListPendingAdminsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListAccountsResponse:
    """Admins awaiting approval (super admin only)."""
    account_id = require_account_id(jwt_service, auth_token)
    return await list_pending_admins_use_case.execute(
        ListAccountsRequest(actor_id=account_id)
    )


@router.get("/admins", response_model=ListAccountsResponse)
async def list_admins(
    list_admins_use_case: FromDishka[ListAdminsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListAccountsResponse:
    """All admin accounts."""
    account_id = require_account_id(jwt_service, auth_token)
    return await list_admins_use_case.execute(ListAccountsRequest(actor_id=account_id))


@router.get("/accounts", response_model=ListAccountsResponse)
async def list_accounts(
    list_all_accounts_use_case: FromDishka[ListAllAccountsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListAccountsResponse:
    """Every account on the platform (super admin only)."""
    account_id = require_account_id(jwt_service, auth_token)
    return await list_all_accounts_use_case.execute(
        ListAccountsRequest(actor_id=account_id)
    )


@router.post(
    "/admins", response_model=CreateAdminResponse, status_code=status.HTTP_201_CREATED
)
async def create_admin(
    request: ProfileFields,
    create_admin_use_case: FromDishka[CreateAdminUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateAdminResponse:
    """Create an admin account awaiting approval (super admin only)."""
    account_id = require_account_id(jwt_service, auth_token)
    return await create_admin_use_case.execute(
        CreateAdminRequest(actor_id=account_id, **request.model_dump())
    )


@router.post("/accounts/{target_id}/approve", response_model=AccountTransitionResponse)
async def approve_admin(
    target_id: str,
    approve_admin_use_case: FromDishka[ApproveAdminUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AccountTransitionResponse:
    """Approve an admin."""
    account_id = require_account_id(jwt_service, auth_token)
    return await approve_admin_use_case.execute(
        AccountTransitionRequest(target_id=target_id, actor_id=account_id)
    )


@router.post("/accounts/{target_id}/reject", response_model=AccountTransitionResponse)
async def reject_admin(
    target_id: str,
    reject_admin_use_case: FromDishka[RejectAdminUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AccountTransitionResponse:
    """Reject an admin."""
    account_id = require_account_id(jwt_service, auth_token)
    return await reject_admin_use_case.execute(
        AccountTransitionRequest(target_id=target_id, actor_id=account_id)
    )


@router.post(
    "/accounts/{target_id}/deactivate", response_model=AccountTransitionResponse
)
async def deactivate_admin(
    target_id: str,
    deactivate_admin_use_case: FromDishka[DeactivateAdminUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AccountTransitionResponse:
    """Deactivate an approved admin."""
    account_id = require_account_id(jwt_service, auth_token)
    return await deactivate_admin_use_case.execute(
        AccountTransitionRequest(target_id=target_id, actor_id=account_id)
    )


@router.post(
    "/accounts/{target_id}/reactivate", response_model=AccountTransitionResponse
)
async def reactivate_admin(
    target_id: str,
    reactivate_admin_use_case: FromDishka[ReactivateAdminUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AccountTransitionResponse:
    """Reactivate an admin (leaves it active and approved)."""
    account_id = require_account_id(jwt_service, auth_token)
    return await reactivate_admin_use_case.execute(
        AccountTransitionRequest(target_id=target_id, actor_id=account_id)
    )


@router.post("/accounts/{target_id}/elevate", response_model=AccountTransitionResponse)
async def elevate_to_admin(
    target_id: str,
    elevate_to_admin_use_case: FromDishka[ElevateToAdminUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AccountTransitionResponse:
    """Turn a regular user into an admin awaiting approval."""
    account_id = require_account_id(jwt_service, auth_token)
    return await elevate_to_admin_use_case.execute(
        AccountTransitionRequest(target_id=target_id, actor_id=account_id)
    )


@router.delete("/accounts/{target_id}", response_model=DeleteAdminResponse)
async def delete_admin(
    target_id: str,
    delete_admin_use_case: FromDishka[DeleteAdminUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteAdminResponse:
    """Hard delete an admin account."""
    account_id = require_account_id(jwt_service, auth_token)
    return await delete_admin_use_case.execute(
        DeleteAdminRequest(target_id=target_id, actor_id=account_id)
    )
