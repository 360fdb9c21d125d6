"""Update post use case."""

from typing import Any

from pydantic import BaseModel, Field

from alumni.application.usecase.common import parse_id, resolve_actor
from alumni.domain.service import AccountService, PostService
from alumni.domain.value import PostId

from .create_post import PostInfo


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str
    actor_id: str  # From the session token
    changes: dict[str, Any] = Field(default_factory=dict)


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostInfo


class UpdatePostUseCase:
    """Use case for editing a post in place."""

    def __init__(
        self, post_service: PostService, account_service: AccountService
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            account_service: Account domain service
        """
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Apply the provided fields to the post.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            NotFoundError: If the post does not exist
            AuthorizationError: If the actor is neither author nor moderator
            ValidationError: If a field is blank or out of bounds
        """
        post_id = PostId(parse_id(request.post_id, "post"))
        actor = await resolve_actor(self.account_service, request.actor_id)

        post = await self.post_service.update_post(post_id, actor, request.changes)
        return UpdatePostResponse(post=PostInfo.from_post(post))
