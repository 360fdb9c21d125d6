"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .comment import InMemoryCommentRepository
from .event import InMemoryEventRegistrationRepository, InMemoryEventRepository
from .post import InMemoryPostRepository
from .post_like import InMemoryPostLikeRepository
from .staff import InMemoryStaffRepository
from .store import InMemoryStore

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCommentRepository",
    "InMemoryEventRegistrationRepository",
    "InMemoryEventRepository",
    "InMemoryPostRepository",
    "InMemoryPostLikeRepository",
    "InMemoryStaffRepository",
    "InMemoryStore",
]
