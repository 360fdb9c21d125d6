"""In-memory post like repository for testing."""

from typing import Optional

from alumni.domain.model.post_like import PostLike
from alumni.domain.repository.post_like import PostLikeRepository
from alumni.domain.value import PostId, PostLikeId

from .store import InMemoryStore


class InMemoryPostLikeRepository(PostLikeRepository):
    """In-memory implementation of PostLikeRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._likes = (store or InMemoryStore()).likes

    async def find_by_post_and_liker(
        self, post_id: PostId, liker_key: str
    ) -> Optional[PostLike]:
        """Find the like a liker left on a post."""
        for like in self._likes.values():
            if like.post_id == post_id and like.liker_key == liker_key:
                return like
        return None

    async def save(self, like: PostLike) -> PostLike:
        """Insert a like."""
        self._likes[like.id] = like
        return like

    async def delete(self, like_id: PostLikeId) -> None:
        """Remove a like."""
        self._likes.pop(like_id, None)

    async def delete_by_post(self, post_id: PostId) -> int:
        """Remove every like of a post."""
        doomed = [like.id for like in self._likes.values() if like.post_id == post_id]
        for like_id in doomed:
            del self._likes[like_id]
        return len(doomed)

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return sum(1 for like in self._likes.values() if like.post_id == post_id)
