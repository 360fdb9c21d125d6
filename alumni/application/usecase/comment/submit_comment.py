"""Submit comment use case."""

from datetime import datetime

from pydantic import BaseModel

from alumni.application.usecase.common import parse_id, resolve_actor
from alumni.domain.service import AccountService, CommentService, PostService
from alumni.domain.value import CommentId, PostId


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    post_id: str  # UUID string
    content: str
    parent_id: str | None = None  # Parent comment ID for replies
    author_id: str | None = None  # From the session token, None when anonymous


class SubmitCommentResponse(BaseModel):
    """Submit comment response."""

    comment_id: str
    post_id: str
    content: str
    author_id: str | None
    parent_id: str | None
    created_at: datetime


class SubmitCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        account_service: AccountService,
    ) -> None:
        """Initialize submit comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            account_service: Account domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.account_service = account_service

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Steps:
        1. Verify the post exists
        2. Resolve the author when the caller is signed in
        3. Create the comment (service validates content and parent)

        Raises:
            ValidationError: If an ID is malformed, content is empty or the
                parent belongs to another post
            NotFoundError: If the post or parent comment does not exist
            AuthenticationError: If the session account can no longer sign in
        """
        post_id = PostId(parse_id(request.post_id, "post"))
        parent_id = (
            CommentId(parse_id(request.parent_id, "comment"))
            if request.parent_id
            else None
        )

        await self.post_service.get_post_by_id(post_id)

        author_id = None
        if request.author_id:
            author = await resolve_actor(self.account_service, request.author_id)
            author_id = author.id

        comment = await self.comment_service.submit_comment(
            post_id=post_id,
            content=request.content,
            author_id=author_id,
            parent_id=parent_id,
        )

        return SubmitCommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            content=comment.content,
            author_id=str(comment.author_id) if comment.author_id else None,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
        )
