"""Delete comment use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import parse_id, resolve_actor
from alumni.domain.service import AccountService, CommentService
from alumni.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    actor_id: str  # From the session token


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    removed: int  # The comment plus its nested replies


class DeleteCommentUseCase:
    """Use case for removing a comment and its replies."""

    def __init__(
        self, comment_service: CommentService, account_service: AccountService
    ) -> None:
        self.comment_service = comment_service
        self.account_service = account_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Delete a comment as its author or as a moderator.

        Raises:
            AuthorizationError: If the actor is neither author nor moderator
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(parse_id(request.comment_id, "comment"))
        actor = await resolve_actor(self.account_service, request.actor_id)

        removed = await self.comment_service.delete_comment(comment_id, actor)
        return DeleteCommentResponse(comment_id=str(comment_id), removed=removed)
