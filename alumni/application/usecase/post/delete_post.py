"""Delete post use case."""

import logfire
from pydantic import BaseModel

from alumni.application.usecase.common import parse_id, resolve_actor
from alumni.domain.service import AccountService, CommentService, PostService
from alumni.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    actor_id: str  # From the session token


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    comments_removed: int


class DeletePostUseCase:
    """Use case for deleting a post together with its comments and likes."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        account_service: AccountService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            account_service: Account domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.account_service = account_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Steps:
        1. Load the actor and the post, check author or moderator rights
        2. Delete the post's comments
        3. Delete the post and its likes

        Raises:
            AuthorizationError: If the actor is neither author nor moderator
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, "post"))
        actor = await resolve_actor(self.account_service, request.actor_id)

        with logfire.span(
            "delete_post.execute", post_id=str(post_id), actor_id=str(actor.id)
        ):
            post = await self.post_service.get_post_by_id(post_id)
            self.post_service.ensure_can_delete(post, actor)

            comments_removed = await self.comment_service.delete_comments_for_post(
                post_id
            )
            await self.post_service.delete_post(post_id, actor)

            return DeletePostResponse(
                post_id=str(post_id), comments_removed=comments_removed
            )
