"""Strongly typed identifiers for alumni domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
PostLikeId = NewType("PostLikeId", UUID)
EventId = NewType("EventId", UUID)
EventRegistrationId = NewType("EventRegistrationId", UUID)
StaffId = NewType("StaffId", UUID)
