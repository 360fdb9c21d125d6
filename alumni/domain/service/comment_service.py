"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from alumni.domain.error import AuthorizationError, NotFoundError, ValidationError
from alumni.domain.model import Account, Comment
from alumni.domain.repository import CommentRepository
from alumni.domain.value import AccountId, Capability, CommentId, PostId

from .base import Service
from .comment_tree import CommentThread, build_comment_tree, count_nodes


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def submit_comment(
        self,
        post_id: PostId,
        content: str,
        author_id: AccountId | None = None,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        The caller is responsible for checking that the post exists.

        Args:
            post_id: Post ID
            content: Comment text
            author_id: Author account ID (None for anonymous comments)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or the parent is on another post
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.submit_comment",
            post_id=str(post_id),
            author_id=str(author_id) if author_id else None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Comment content cannot be empty")

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this post"
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                content=content,
                author_id=author_id,
                parent_id=parent_id,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                anonymous=author_id is None,
                reply=parent_id is not None,
            )
            return saved

    async def get_comment_thread(self, post_id: PostId) -> CommentThread:
        """Get a post's comments assembled into a tree.

        Args:
            post_id: Post ID

        Returns:
            Comment thread with root comments newest first and the flat count
        """
        with logfire.span("comment_service.get_comment_thread", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            roots = build_comment_tree(comments)

            placed = count_nodes(roots)
            if placed < len(comments):
                logfire.warn(
                    "Orphaned comments dropped from tree",
                    post_id=str(post_id),
                    dropped=len(comments) - placed,
                )

            logfire.info(
                "Comment tree built",
                post_id=str(post_id),
                count=len(comments),
                roots=len(roots),
            )
            return CommentThread(post_id=post_id, comments=roots, total=len(comments))

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId, actor: Account) -> int:
        """Hard delete a comment and its replies.

        Only the comment's author or a content moderator may delete it.

        Args:
            comment_id: Comment ID
            actor: Authenticated account performing the deletion

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If the comment does not exist
            AuthorizationError: If the actor is neither author nor moderator
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            comment = await self.get_comment_by_id(comment_id)

            is_author = comment.author_id is not None and comment.author_id == actor.id
            if not is_author and not actor.has_capability(
                Capability.MODERATE_CONTENT
            ):
                logfire.warn(
                    "Comment deletion denied",
                    comment_id=str(comment_id),
                    actor_id=str(actor.id),
                    role=actor.role.value,
                )
                raise AuthorizationError("Not authorized to delete this comment")

            removed = await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
                removed=removed,
            )
            return removed

    async def delete_comments_for_post(self, post_id: PostId) -> int:
        """Delete every comment of a post (post deletion cascade)."""
        with logfire.span(
            "comment_service.delete_comments_for_post", post_id=str(post_id)
        ):
            removed = await self.comment_repository.delete_by_post(post_id)
            logfire.info("Post comments deleted", post_id=str(post_id), removed=removed)
            return removed

    async def count_for_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        return await self.comment_repository.count_by_post(post_id)

    async def count_all(self) -> int:
        """Count all comments on the platform."""
        return await self.comment_repository.count()
