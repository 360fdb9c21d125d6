"""In-memory comment repository for testing."""

from typing import Optional

from alumni.domain.model.comment import Comment
from alumni.domain.repository.comment import CommentRepository
from alumni.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._comments = (store or InMemoryStore()).comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and every reply beneath it."""
        if comment_id not in self._comments:
            return 0

        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent_id = frontier.pop()
            for comment in self._comments.values():
                if comment.parent_id == parent_id and comment.id not in doomed:
                    doomed.add(comment.id)
                    frontier.append(comment.id)

        for doomed_id in doomed:
            del self._comments[doomed_id]
        return len(doomed)

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        doomed = [c.id for c in self._comments.values() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def count(self) -> int:
        """Count all comments."""
        return len(self._comments)
