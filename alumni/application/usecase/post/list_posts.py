"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from alumni.domain.service import PostService

from .create_post import PostInfo


class ListPostsRequest(BaseModel):
    """List posts request."""

    search: str | None = None
    limit: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostInfo]
    limit: int
    offset: int


class ListPostsUseCase:
    """Use case for listing published posts with search and pagination."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """List published posts newest first."""
        with logfire.span(
            "list_posts.execute",
            search=request.search,
            limit=request.limit,
            offset=request.offset,
        ):
            posts = await self.post_service.list_posts(
                search=request.search,
                limit=request.limit,
                offset=request.offset,
            )
            return ListPostsResponse(
                posts=[PostInfo.from_post(post) for post in posts],
                limit=request.limit,
                offset=request.offset,
            )
