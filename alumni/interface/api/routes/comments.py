"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from alumni.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)
from alumni.domain.service import JWTService
from alumni.interface.api.session import require_account_id

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class SubmitCommentAPIRequest(BaseModel):
    """API request for submitting a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/posts/{post_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    post_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> ListCommentsResponse:
    """Get a post's comments as a tree.

    Top-level comments come newest first; replies are nested under their
    parent in the order they were written.
    """
    return await list_comments_use_case.execute(ListCommentsRequest(post_id=post_id))


@router.post(
    "/posts/{post_id}/comments",
    response_model=SubmitCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_comment(
    post_id: str,
    request: SubmitCommentAPIRequest,
    submit_comment_use_case: FromDishka[SubmitCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SubmitCommentResponse:
    """Comment on a post or reply to a comment.

    Anonymous comments are allowed. Signed-in callers are recorded as author.
    """
    author_id = jwt_service.get_account_id_from_token(auth_token)
    return await submit_comment_use_case.execute(
        SubmitCommentRequest(
            post_id=post_id,
            content=request.content,
            parent_id=request.parent_id,
            author_id=author_id,
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and its replies (author or moderator)."""
    account_id = require_account_id(jwt_service, auth_token)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, actor_id=account_id)
    )
