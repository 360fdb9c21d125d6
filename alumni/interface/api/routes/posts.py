"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Request, status
from pydantic import BaseModel, Field

from alumni.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from alumni.domain.service import JWTService
from alumni.domain.value import PostStatus
from alumni.interface.api.session import require_account_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    category: str = Field(min_length=1, max_length=100)
    excerpt: str | None = Field(default=None, max_length=500)
    tags: list[str] = Field(default_factory=list)
    featured_image: str | None = None
    status: PostStatus = PostStatus.PUBLISHED


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    excerpt: str | None = Field(default=None, max_length=500)
    tags: list[str] | None = None
    featured_image: str | None = None
    status: PostStatus | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    search: str | None = Query(default=None, max_length=200),
    limit: int = Query(default=10, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListPostsResponse:
    """List published posts, newest first."""
    return await list_posts_use_case.execute(
        ListPostsRequest(search=search, limit=limit, offset=offset)
    )


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Publish a post. Requires authentication."""
    account_id = require_account_id(jwt_service, auth_token)
    return await create_post_use_case.execute(
        CreatePostRequest(author_id=account_id, **request.model_dump())
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a post with its comment and like counts."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.put("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdatePostResponse:
    """Edit a post. Only the author or a content moderator may edit."""
    account_id = require_account_id(jwt_service, auth_token)
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            actor_id=account_id,
            changes=request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeletePostResponse:
    """Delete a post with its comments and likes.

    Only the author or a content moderator may delete.
    """
    account_id = require_account_id(jwt_service, auth_token)
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, actor_id=account_id)
    )


@router.post("/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    post_id: str,
    http_request: Request,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like or unlike a post.

    Signed-in members are keyed by account, visitors by client address.
    """
    account_id = jwt_service.get_account_id_from_token(auth_token)
    if account_id:
        liker_key = f"account:{account_id}"
    else:
        host = http_request.client.host if http_request.client else "unknown"
        liker_key = f"ip:{host}"

    return await toggle_like_use_case.execute(
        ToggleLikeRequest(post_id=post_id, liker_key=liker_key)
    )
