"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from alumni.domain.model.post import Post
from alumni.domain.value import AccountId, PostId, PostStatus


class PostRepository(ABC):
    """Repository for Post aggregate."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        status: Optional[PostStatus] = PostStatus.PUBLISHED,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first with filtering and pagination.

        Args:
            status: Only posts with this status (None for any status)
            search: Case-insensitive substring matched against title,
                content and excerpt
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: AccountId) -> List[Post]:
        """Find posts written by an account, newest first."""
        pass

    @abstractmethod
    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count posts, optionally only those created since a moment."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Hard delete a post.

        Returns:
            True if a post was removed
        """
        pass
