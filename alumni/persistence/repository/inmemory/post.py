"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from alumni.domain.model.post import Post
from alumni.domain.repository.post import PostRepository
from alumni.domain.value import AccountId, PostId, PostStatus

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()
        self._posts = self._store.posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        status: Optional[PostStatus] = PostStatus.PUBLISHED,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts newest first with filtering and pagination."""
        posts = list(self._posts.values())

        if status is not None:
            posts = [p for p in posts if p.status == status]

        if search:
            needle = search.lower()
            posts = [
                p
                for p in posts
                if needle in p.title.lower()
                or needle in p.content.lower()
                or needle in p.excerpt.lower()
            ]

        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def find_by_author(self, author_id: AccountId) -> list[Post]:
        """Find posts written by an account, newest first."""
        posts = [p for p in self._posts.values() if p.author_id == author_id]
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count posts, optionally only those created since a moment."""
        return sum(
            1
            for p in self._posts.values()
            if created_since is None or p.created_at >= created_since
        )

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Hard delete a post with its comments and likes."""
        return self._store.delete_post(post_id)
