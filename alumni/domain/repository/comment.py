"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from alumni.domain.model.comment import Comment
from alumni.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are stored flat. Tree assembly happens in the domain service.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in creation order.

        Args:
            post_id: The post ID

        Returns:
            Flat list of comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> int:
        """Hard delete a comment and every reply beneath it.

        Args:
            comment_id: The comment ID to delete

        Returns:
            Number of comments removed (0 if the comment did not exist)
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Hard delete every comment of a post.

        Returns:
            Number of comments removed
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all comments."""
        pass
