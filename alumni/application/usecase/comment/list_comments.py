"""List comments use case."""

from datetime import datetime

from pydantic import BaseModel

from alumni.application.usecase.common import parse_id
from alumni.domain.service import CommentService, CommentTreeNode, PostService
from alumni.domain.value import PostId


class CommentNodeItem(BaseModel):
    """Comment with its nested replies."""

    comment_id: str
    content: str
    author_id: str | None
    created_at: datetime
    replies: list["CommentNodeItem"]

    @classmethod
    def from_node(cls, node: CommentTreeNode) -> "CommentNodeItem":
        return cls(
            comment_id=str(node.id),
            content=node.content,
            author_id=str(node.author_id) if node.author_id else None,
            created_at=node.created_at,
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str  # UUID string


class ListCommentsResponse(BaseModel):
    """List comments response."""

    post_id: str
    comments: list[CommentNodeItem]
    total: int


class ListCommentsUseCase:
    """Use case for reading a post's discussion as a comment tree."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Root comments come newest first, replies oldest first. ``total``
        counts every stored comment of the post.

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post does not exist
        """
        post_id = PostId(parse_id(request.post_id, "post"))
        await self.post_service.get_post_by_id(post_id)

        thread = await self.comment_service.get_comment_thread(post_id)

        return ListCommentsResponse(
            post_id=str(thread.post_id),
            comments=[CommentNodeItem.from_node(node) for node in thread.comments],
            total=thread.total,
        )
