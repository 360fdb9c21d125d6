"""Domain value objects for the alumni platform."""

from alumni.domain.value.identifiers import (
    AccountId,
    CommentId,
    EventId,
    EventRegistrationId,
    PostId,
    PostLikeId,
    StaffId,
)
from alumni.domain.value.types import (
    ROLE_CAPABILITIES,
    AccountState,
    AccountTransition,
    ApprovalStatus,
    Capability,
    EventStatus,
    PostStatus,
    Role,
    Username,
)

__all__ = [
    # Identifiers
    "AccountId",
    "PostId",
    "CommentId",
    "PostLikeId",
    "EventId",
    "EventRegistrationId",
    "StaffId",
    # Types
    "Role",
    "ApprovalStatus",
    "AccountState",
    "AccountTransition",
    "Capability",
    "ROLE_CAPABILITIES",
    "PostStatus",
    "EventStatus",
    "Username",
]
