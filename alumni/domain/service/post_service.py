"""Post domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from alumni.domain.error import AuthorizationError, NotFoundError, ValidationError
from alumni.domain.model import Account, Post, PostLike
from alumni.domain.repository import PostLikeRepository, PostRepository
from alumni.domain.value import (
    AccountId,
    Capability,
    PostId,
    PostLikeId,
    PostStatus,
)

from .base import Service

EXCERPT_LENGTH = 200

EDITABLE_POST_FIELDS = frozenset(
    {"title", "content", "excerpt", "category", "tags", "featured_image", "status"}
)


def make_excerpt(content: str) -> str:
    """Derive a short preview from post content."""
    content = " ".join(content.split())
    if len(content) <= EXCERPT_LENGTH:
        return content
    return content[:EXCERPT_LENGTH].rstrip() + "..."


class PostService(Service):
    """Domain service for blog posts and their likes."""

    def __init__(
        self,
        post_repository: PostRepository,
        like_repository: PostLikeRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            like_repository: Post like repository
        """
        self.post_repository = post_repository
        self.like_repository = like_repository

    async def create_post(
        self,
        author: Account,
        title: str,
        content: str,
        category: str,
        excerpt: str | None = None,
        tags: list[str] | None = None,
        featured_image: str | None = None,
        status: PostStatus = PostStatus.PUBLISHED,
    ) -> Post:
        """Create a new post.

        Args:
            author: Authenticated account writing the post
            title: Post title
            content: Post body
            category: Post category
            excerpt: Optional preview text (derived from content if omitted)
            tags: Optional tags
            featured_image: Optional image URL
            status: Publication status

        Returns:
            Created post

        Raises:
            AuthorizationError: If the author cannot sign in
            ValidationError: If title or content is blank
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author.id), category=category
        ):
            if not author.can_sign_in:
                logfire.warn("Post creation denied", author_id=str(author.id))
                raise AuthorizationError("Account cannot publish posts")

            title = title.strip()
            content = content.strip()
            if not title or not content:
                raise ValidationError("Post title and content are required")

            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                content=content,
                excerpt=(excerpt or "").strip() or make_excerpt(content),
                author_id=author.id,
                category=category.strip(),
                status=status,
                tags=[t.strip() for t in tags or [] if t.strip()],
                featured_image=featured_image,
                created_at=now,
                updated_at=now,
            )

            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                author_id=str(author.id),
                status=saved.status.value,
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(
        self,
        search: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """List published posts, newest first.

        Args:
            search: Optional case-insensitive text filter
            limit: Maximum number of posts
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        with logfire.span(
            "post_service.list_posts", search=search, limit=limit, offset=offset
        ):
            search = search.strip() if search else None
            posts = await self.post_repository.find_all(
                status=PostStatus.PUBLISHED,
                search=search or None,
                limit=limit,
                offset=offset,
            )
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def list_posts_by_author(self, author_id: AccountId) -> list[Post]:
        """List every post written by an account, newest first."""
        with logfire.span(
            "post_service.list_posts_by_author", author_id=str(author_id)
        ):
            return await self.post_repository.find_by_author(author_id)

    async def delete_post(self, post_id: PostId, actor: Account) -> Post:
        """Hard delete a post and its likes.

        Comments are removed separately through ``CommentService``.

        Args:
            post_id: Post ID
            actor: Authenticated account performing the deletion

        Returns:
            The deleted post

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the actor is neither author nor moderator
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), actor_id=str(actor.id)
        ):
            post = await self.get_post_by_id(post_id)
            self.ensure_can_delete(post, actor)

            likes = await self.like_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted",
                post_id=str(post_id),
                actor_id=str(actor.id),
                likes_removed=likes,
            )
            return post

    def ensure_can_delete(self, post: Post, actor: Account) -> None:
        """Check that the actor is the post's author or a content moderator.

        Raises:
            AuthorizationError: If the actor may not delete the post
        """
        self._ensure_author_or_moderator(post, actor, "delete")

    def _ensure_author_or_moderator(
        self, post: Post, actor: Account, action: str
    ) -> None:
        is_author = post.author_id == actor.id and actor.can_sign_in
        if not is_author and not actor.has_capability(Capability.MODERATE_CONTENT):
            logfire.warn(
                f"Post {action} denied",
                post_id=str(post.id),
                actor_id=str(actor.id),
                role=actor.role.value,
            )
            raise AuthorizationError(f"Not authorized to {action} this post")

    async def update_post(
        self, post_id: PostId, actor: Account, changes: dict[str, Any]
    ) -> Post:
        """Apply a partial update to a post.

        Args:
            post_id: Post ID
            actor: Authenticated account performing the update
            changes: Post fields to replace (title, content, excerpt,
                category, tags, featured_image, status)

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the actor is neither author nor moderator
            ValidationError: If a field is blank or out of bounds
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), actor_id=str(actor.id)
        ):
            post = await self.get_post_by_id(post_id)
            self._ensure_author_or_moderator(post, actor, "update")

            unknown = set(changes) - EDITABLE_POST_FIELDS
            if unknown:
                raise ValidationError(f"Fields cannot be edited: {sorted(unknown)}")

            changes = dict(changes)

            for name in ("title", "content", "category", "excerpt"):
                if isinstance(changes.get(name), str):
                    changes[name] = changes[name].strip()
            if "tags" in changes:
                tags = changes["tags"] or []
                changes["tags"] = [t.strip() for t in tags if t.strip()]
            if changes.get("excerpt") == "":
                changes["excerpt"] = make_excerpt(changes.get("content", post.content))

            try:
                updated = post.evolve(**changes, updated_at=datetime.now())
            except PydanticValidationError as e:
                messages = "; ".join(err["msg"] for err in e.errors())
                raise ValidationError(f"Invalid post details: {messages}")

            saved = await self.post_repository.save(updated)
            logfire.info(
                "Post updated",
                post_id=str(post_id),
                actor_id=str(actor.id),
                fields=sorted(changes),
            )
            return saved

    async def toggle_like(self, post_id: PostId, liker_key: str) -> bool:
        """Like a post, or remove the like if the liker already left one.

        Args:
            post_id: Post ID
            liker_key: Account ID for members, client address for visitors

        Returns:
            True if the post is now liked by this liker, False if unliked

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.toggle_like", post_id=str(post_id)):
            await self.get_post_by_id(post_id)

            existing = await self.like_repository.find_by_post_and_liker(
                post_id, liker_key
            )
            if existing:
                await self.like_repository.delete(existing.id)
                logfire.info("Post unliked", post_id=str(post_id))
                return False

            like = PostLike(
                id=PostLikeId(uuid4()),
                post_id=post_id,
                liker_key=liker_key,
                created_at=datetime.now(),
            )
            await self.like_repository.save(like)
            logfire.info("Post liked", post_id=str(post_id))
            return True

    async def count_likes(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return await self.like_repository.count_by_post(post_id)

    async def count_posts(self, created_since: datetime | None = None) -> int:
        """Count posts, optionally only those created since a moment."""
        return await self.post_repository.count(created_since)
