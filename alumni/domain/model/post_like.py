"""PostLike entity.

Likes are toggled per liker. Anonymous visitors are keyed by their client
address, signed-in members by their account ID.
"""

from datetime import datetime

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import PostId, PostLikeId


class PostLike(DomainModel):
    """A single like on a post."""

    id: PostLikeId
    post_id: PostId
    liker_key: str = Field(min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
