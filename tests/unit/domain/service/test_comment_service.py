"""Unit tests for CommentService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from alumni.domain.error import AuthorizationError, NotFoundError, ValidationError
from alumni.domain.repository import CommentRepository
from alumni.domain.service import CommentService
from alumni.domain.value import CommentId, PostId, Role
from tests.conftest import make_account, make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestSubmitComment:
    """Tests for submit_comment."""

    @pytest.mark.asyncio
    async def test_top_level_comment_is_saved(self, unit_env):
        """A top-level comment has no parent and is stored."""
        # Arrange
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())

        # Act
        comment = await service.submit_comment(post_id, "  Great article!  ")

        # Assert
        assert comment.parent_id is None
        assert comment.author_id is None
        assert comment.content == "Great article!"
        assert await repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_reply_links_to_parent(self, unit_env):
        """A reply records its parent and author."""
        # Arrange
        service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())
        author = make_account()
        parent = await service.submit_comment(post_id, "Question?")

        # Act
        reply = await service.submit_comment(
            post_id, "Answer.", author_id=author.id, parent_id=parent.id
        )

        # Assert
        assert reply.parent_id == parent.id
        assert reply.author_id == author.id

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        """Whitespace-only content is refused."""
        service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await service.submit_comment(PostId(uuid4()), "   \n ")

    @pytest.mark.asyncio
    async def test_missing_parent_rejected(self, unit_env):
        """Replying to an unknown comment raises NotFoundError."""
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.submit_comment(
                PostId(uuid4()), "Reply", parent_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_rejected(self, unit_env):
        """A reply must stay on its parent's post."""
        # Arrange
        service = await unit_env.get(CommentService)
        parent = await service.submit_comment(PostId(uuid4()), "Elsewhere")

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.submit_comment(
                PostId(uuid4()), "Reply", parent_id=parent.id
            )


class TestGetCommentThread:
    """Tests for get_comment_thread."""

    @pytest.mark.asyncio
    async def test_thread_counts_every_stored_comment(self, unit_env):
        """Total counts stored comments, including orphans left out of the tree."""
        # Arrange
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        t0 = datetime(2024, 1, 1)
        root = make_comment(post_id, t0)
        reply = make_comment(post_id, t0 + timedelta(minutes=1), parent_id=root.id)
        orphan = make_comment(
            post_id, t0 + timedelta(minutes=2), parent_id=CommentId(uuid4())
        )
        other_post = make_comment(PostId(uuid4()), t0)
        for comment in (root, reply, orphan, other_post):
            await repo.save(comment)

        # Act
        thread = await service.get_comment_thread(post_id)

        # Assert
        assert thread.post_id == post_id
        assert thread.total == 3
        assert [n.id for n in thread.comments] == [root.id]
        assert [n.id for n in thread.comments[0].replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_empty_thread(self, unit_env):
        """A post without comments has an empty thread."""
        service = await unit_env.get(CommentService)

        thread = await service.get_comment_thread(PostId(uuid4()))

        assert thread.comments == []
        assert thread.total == 0


class TestDeleteComment:
    """Tests for delete_comment."""

    @pytest.mark.asyncio
    async def test_author_deletes_subtree(self, unit_env):
        """Deleting a comment removes its nested replies too."""
        # Arrange
        service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())
        author = make_account()
        root = await service.submit_comment(post_id, "root", author_id=author.id)
        child = await service.submit_comment(post_id, "child", parent_id=root.id)
        await service.submit_comment(post_id, "grandchild", parent_id=child.id)
        await service.submit_comment(post_id, "unrelated")

        # Act
        removed = await service.delete_comment(root.id, author)

        # Assert
        assert removed == 3
        assert await service.count_for_post(post_id) == 1

    @pytest.mark.asyncio
    async def test_moderator_may_delete_anonymous_comment(self, unit_env):
        """Admins moderate comments they didn't write."""
        # Arrange
        service = await unit_env.get(CommentService)
        comment = await service.submit_comment(PostId(uuid4()), "spam")
        moderator = make_account("moderator", role=Role.ADMIN)

        # Act
        removed = await service.delete_comment(comment.id, moderator)

        # Assert
        assert removed == 1

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """A regular user cannot delete someone else's comment."""
        # Arrange
        service = await unit_env.get(CommentService)
        author = make_account("author")
        comment = await service.submit_comment(
            PostId(uuid4()), "mine", author_id=author.id
        )

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await service.delete_comment(comment.id, make_account("intruder"))

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        """Deleting a missing comment raises NotFoundError."""
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.delete_comment(CommentId(uuid4()), make_account())
