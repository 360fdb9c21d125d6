"""Domain model entities for the alumni platform."""

from alumni.domain.model.account import Account, AccountProfile, ProfileUpdate
from alumni.domain.model.comment import Comment
from alumni.domain.model.event import Event, EventRegistration
from alumni.domain.model.post import Post
from alumni.domain.model.post_like import PostLike
from alumni.domain.model.staff import StaffMember

__all__ = [
    "Account",
    "AccountProfile",
    "ProfileUpdate",
    "Post",
    "Comment",
    "PostLike",
    "Event",
    "EventRegistration",
    "StaffMember",
]
