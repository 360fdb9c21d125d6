"""Post aggregate root.

Posts are the blog articles alumni and staff publish on the platform.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from alumni.domain.model.common import DomainModel
from alumni.domain.value import AccountId, PostId, PostStatus


class Post(DomainModel):
    """Blog post aggregate root."""

    id: PostId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    excerpt: str = Field(default="", max_length=500)
    author_id: AccountId
    category: str = Field(min_length=1, max_length=100)
    status: PostStatus = PostStatus.PUBLISHED
    tags: list[str] = Field(default_factory=list)
    featured_image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
