"""Staff directory use cases."""

from .list_staff import (
    GetStaffRequest,
    GetStaffResponse,
    GetStaffUseCase,
    ListStaffRequest,
    ListStaffResponse,
    ListStaffUseCase,
    StaffInfo,
    StaffUserInfo,
)
from .manage_staff import (
    CreateStaffRequest,
    CreateStaffResponse,
    CreateStaffUseCase,
    DeleteStaffRequest,
    DeleteStaffUseCase,
    NewStaffAccount,
    StaffResponse,
    UpdateStaffRequest,
    UpdateStaffUseCase,
)

__all__ = [
    "CreateStaffRequest",
    "CreateStaffResponse",
    "CreateStaffUseCase",
    "DeleteStaffRequest",
    "DeleteStaffUseCase",
    "GetStaffRequest",
    "GetStaffResponse",
    "GetStaffUseCase",
    "ListStaffRequest",
    "ListStaffResponse",
    "ListStaffUseCase",
    "NewStaffAccount",
    "StaffInfo",
    "StaffResponse",
    "StaffUserInfo",
    "UpdateStaffRequest",
    "UpdateStaffUseCase",
]
