"""Repository interfaces for the alumni domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from alumni.domain.repository.account import AccountRepository
from alumni.domain.repository.comment import CommentRepository
from alumni.domain.repository.event import (
    EventRegistrationRepository,
    EventRepository,
)
from alumni.domain.repository.post import PostRepository
from alumni.domain.repository.post_like import PostLikeRepository
from alumni.domain.repository.staff import StaffRepository

__all__ = [
    "AccountRepository",
    "PostRepository",
    "CommentRepository",
    "PostLikeRepository",
    "EventRepository",
    "EventRegistrationRepository",
    "StaffRepository",
]
