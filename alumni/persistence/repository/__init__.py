"""PostgreSQL repository implementations."""

from alumni.persistence.repository.account import PostgresAccountRepository
from alumni.persistence.repository.comment import PostgresCommentRepository
from alumni.persistence.repository.event import (
    PostgresEventRegistrationRepository,
    PostgresEventRepository,
)
from alumni.persistence.repository.post import PostgresPostRepository
from alumni.persistence.repository.post_like import PostgresPostLikeRepository
from alumni.persistence.repository.staff import PostgresStaffRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresPostLikeRepository",
    "PostgresEventRepository",
    "PostgresEventRegistrationRepository",
    "PostgresStaffRepository",
]
