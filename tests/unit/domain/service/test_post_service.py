"""Unit tests for PostService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from alumni.domain.error import AuthorizationError, NotFoundError, ValidationError
from alumni.domain.model import Post
from alumni.domain.repository import PostRepository
from alumni.domain.service import PostService
from alumni.domain.service.post_service import make_excerpt
from alumni.domain.value import ApprovalStatus, PostId, PostStatus, Role
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def make_post(author_id, title="Reunion", status=PostStatus.PUBLISHED, created_at=None):
    now = created_at or datetime.now()
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=f"{title} content",
        excerpt=title,
        author_id=author_id,
        category="news",
        status=status,
        created_at=now,
        updated_at=now,
    )


class TestMakeExcerpt:
    """Tests for excerpt derivation."""

    def test_short_content_kept(self):
        assert make_excerpt("Short  and\nsweet") == "Short and sweet"

    def test_long_content_truncated(self):
        excerpt = make_excerpt("word " * 100)
        assert excerpt.endswith("...")
        assert len(excerpt) <= 203


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_post_derives_excerpt(self, unit_env):
        """Missing excerpt is derived from content, tags are cleaned."""
        # Arrange
        service = await unit_env.get(PostService)
        author = make_account()

        # Act
        post = await service.create_post(
            author=author,
            title=" Class of 2010 reunion ",
            content="We are meeting at the old campus.",
            category="events",
            tags=["reunion", " ", "2010 "],
        )

        # Assert
        assert post.title == "Class of 2010 reunion"
        assert post.excerpt == "We are meeting at the old campus."
        assert post.tags == ["reunion", "2010"]
        assert post.author_id == author.id
        assert post.status == PostStatus.PUBLISHED

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, unit_env):
        """Title and content are required."""
        service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await service.create_post(make_account(), "  ", "body", "news")

    @pytest.mark.asyncio
    async def test_account_that_cannot_sign_in_cannot_post(self, unit_env):
        """A pending admin cannot publish."""
        service = await unit_env.get(PostService)
        pending = make_account(
            "pending", role=Role.ADMIN, approval_status=ApprovalStatus.PENDING
        )

        with pytest.raises(AuthorizationError):
            await service.create_post(pending, "Title", "body", "news")


class TestListPosts:
    """Tests for list_posts."""

    @pytest.mark.asyncio
    async def test_lists_published_newest_first_with_search(self, unit_env):
        """Drafts are hidden; search matches title case-insensitively."""
        # Arrange
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        author = make_account()
        t0 = datetime(2024, 1, 1)
        old = make_post(author.id, "Homecoming", created_at=t0)
        new = make_post(author.id, "Career fair", created_at=t0 + timedelta(days=1))
        draft = make_post(author.id, "Secret draft", status=PostStatus.DRAFT)
        for post in (old, new, draft):
            await repo.save(post)

        # Act
        everything = await service.list_posts()
        found = await service.list_posts(search="HOMECOMING")
        paged = await service.list_posts(limit=1, offset=1)

        # Assert
        assert [p.id for p in everything] == [new.id, old.id]
        assert [p.id for p in found] == [old.id]
        assert [p.id for p in paged] == [old.id]


class TestDeletePost:
    """Tests for delete_post and ensure_can_delete."""

    @pytest.mark.asyncio
    async def test_author_deletes_post_and_likes(self, unit_env):
        """Deleting a post removes it and its likes."""
        # Arrange
        service = await unit_env.get(PostService)
        author = make_account()
        post = await service.create_post(author, "Title", "body", "news")
        await service.toggle_like(post.id, "ip:10.0.0.1")

        # Act
        await service.delete_post(post.id, author)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_post_by_id(post.id)
        assert await service.count_likes(post.id) == 0

    @pytest.mark.asyncio
    async def test_moderator_may_delete(self, unit_env):
        """Admins may delete posts they didn't write."""
        service = await unit_env.get(PostService)
        post = await service.create_post(make_account(), "Title", "body", "news")

        await service.delete_post(post.id, make_account("moderator", role=Role.ADMIN))

        assert await service.count_posts() == 0

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Regular users may only delete their own posts."""
        service = await unit_env.get(PostService)
        post = await service.create_post(make_account(), "Title", "body", "news")

        with pytest.raises(AuthorizationError):
            await service.delete_post(post.id, make_account("intruder"))


class TestToggleLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        """Toggling twice returns to no like; likers are independent."""
        # Arrange
        service = await unit_env.get(PostService)
        post = await service.create_post(make_account(), "Title", "body", "news")

        # Act & Assert
        assert await service.toggle_like(post.id, "ip:1.1.1.1") is True
        assert await service.toggle_like(post.id, "account:abc") is True
        assert await service.count_likes(post.id) == 2
        assert await service.toggle_like(post.id, "ip:1.1.1.1") is False
        assert await service.count_likes(post.id) == 1

    @pytest.mark.asyncio
    async def test_like_unknown_post(self, unit_env):
        """Liking a missing post raises NotFoundError."""
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.toggle_like(PostId(uuid4()), "ip:1.1.1.1")


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_author_updates_fields(self, unit_env):
        """Strings are trimmed, tags cleaned, untouched fields kept."""
        # Arrange
        service = await unit_env.get(PostService)
        author = make_account()
        post = await service.create_post(author, "Title", "body", "news")

        # Act
        updated = await service.update_post(
            post.id, author, {"title": " New title ", "tags": ["a", " ", "b "]}
        )

        # Assert
        assert updated.title == "New title"
        assert updated.tags == ["a", "b"]
        assert updated.content == "body"
        assert updated.updated_at >= post.updated_at
        assert await service.get_post_by_id(post.id) == updated

    @pytest.mark.asyncio
    async def test_cleared_excerpt_is_derived_again(self, unit_env):
        service = await unit_env.get(PostService)
        author = make_account()
        post = await service.create_post(author, "Title", "body", "news", excerpt="x")

        updated = await service.update_post(
            post.id, author, {"content": "Fresh body", "excerpt": "  "}
        )

        assert updated.excerpt == "Fresh body"

    @pytest.mark.asyncio
    async def test_moderator_may_update(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(make_account(), "Title", "body", "news")

        updated = await service.update_post(
            post.id,
            make_account("moderator", role=Role.ADMIN),
            {"status": PostStatus.DRAFT},
        )

        assert updated.status == PostStatus.DRAFT

    @pytest.mark.asyncio
    async def test_other_user_cannot_update(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(make_account(), "Title", "body", "news")

        with pytest.raises(AuthorizationError):
            await service.update_post(post.id, make_account("intruder"), {"title": "x"})

    @pytest.mark.asyncio
    async def test_invalid_changes_rejected(self, unit_env):
        """Blank titles and non-editable fields are refused."""
        # Arrange
        service = await unit_env.get(PostService)
        author = make_account()
        post = await service.create_post(author, "Title", "body", "news")

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.update_post(post.id, author, {"title": "   "})
        with pytest.raises(ValidationError):
            await service.update_post(post.id, author, {"author_id": uuid4()})
        assert (await service.get_post_by_id(post.id)).title == "Title"

    @pytest.mark.asyncio
    async def test_update_unknown_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.update_post(PostId(uuid4()), make_account(), {"title": "x"})
