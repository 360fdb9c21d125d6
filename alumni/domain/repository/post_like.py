"""PostLike repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from alumni.domain.model.post_like import PostLike
from alumni.domain.value import PostId, PostLikeId


class PostLikeRepository(ABC):
    """Repository for PostLike entity."""

    @abstractmethod
    async def find_by_post_and_liker(
        self, post_id: PostId, liker_key: str
    ) -> Optional[PostLike]:
        """Find the like a liker left on a post, if any."""
        pass

    @abstractmethod
    async def save(self, like: PostLike) -> PostLike:
        """Insert a like."""
        pass

    @abstractmethod
    async def delete(self, like_id: PostLikeId) -> None:
        """Remove a like."""
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Remove every like of a post.

        Returns:
            Number of likes removed
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        pass
