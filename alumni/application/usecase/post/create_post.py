"""Create post use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from alumni.application.usecase.common import resolve_actor
from alumni.domain.model import Post
from alumni.domain.service import AccountService, PostService
from alumni.domain.value import PostStatus


class PostInfo(BaseModel):
    """Post details in responses."""

    post_id: str
    title: str
    content: str
    excerpt: str
    author_id: str
    category: str
    status: PostStatus
    tags: list[str]
    featured_image: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostInfo":
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            excerpt=post.excerpt,
            author_id=str(post.author_id),
            category=post.category,
            status=post.status,
            tags=list(post.tags),
            featured_image=post.featured_image,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # From the session token
    title: str
    content: str
    category: str
    excerpt: str | None = None
    tags: list[str] = Field(default_factory=list)
    featured_image: str | None = None
    status: PostStatus = PostStatus.PUBLISHED


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostInfo


class CreatePostUseCase:
    """Use case for publishing a blog post."""

    def __init__(
        self, post_service: PostService, account_service: AccountService
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            account_service: Account domain service
        """
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Create a post for the signed-in account.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            ValidationError: If title or content is blank
        """
        author = await resolve_actor(self.account_service, request.author_id)
        post = await self.post_service.create_post(
            author=author,
            title=request.title,
            content=request.content,
            category=request.category,
            excerpt=request.excerpt,
            tags=request.tags,
            featured_image=request.featured_image,
            status=request.status,
        )
        return CreatePostResponse(post=PostInfo.from_post(post))
