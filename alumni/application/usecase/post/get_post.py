"""Get post use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import parse_id
from alumni.domain.service import CommentService, PostService
from alumni.domain.value import PostId

from .create_post import PostInfo


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostInfo
    comment_count: int
    like_count: int


class GetPostUseCase:
    """Use case for reading a single post with its counters."""

    def __init__(
        self, post_service: PostService, comment_service: CommentService
    ) -> None:
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Get a post by ID.

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, "post"))
        post = await self.post_service.get_post_by_id(post_id)

        return GetPostResponse(
            post=PostInfo.from_post(post),
            comment_count=await self.comment_service.count_for_post(post_id),
            like_count=await self.post_service.count_likes(post_id),
        )
