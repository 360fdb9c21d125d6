"""Toggle like use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import parse_id
from alumni.domain.service import PostService
from alumni.domain.value import PostId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: str
    liker_key: str  # Account ID for members, client address for visitors


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked: bool
    like_count: int


class ToggleLikeUseCase:
    """Use case for liking or unliking a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        post_id = PostId(parse_id(request.post_id, "post"))
        liked = await self.post_service.toggle_like(post_id, request.liker_key)
        return ToggleLikeResponse(
            liked=liked, like_count=await self.post_service.count_likes(post_id)
        )
