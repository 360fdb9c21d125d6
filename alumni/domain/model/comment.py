"""Comment entity.

Comments are threaded discussions on blog posts with unlimited depth.
They are stored flat; the tree is assembled at read time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import AccountId, CommentId, PostId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - post_id: Owning post (required)
    - parent_id: Direct parent comment on the same post (None for top-level)

    Comments are never edited in place. ``author_id`` is None for
    anonymous comments.
    """

    id: CommentId
    post_id: PostId
    content: str = Field(min_length=1, max_length=10000)
    author_id: Optional[AccountId] = None
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
