"""Unit tests for PostService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from discuss.domain.repository import PostRepository
from discuss.domain.service import PostService
from discuss.domain.value import PostId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_saves_post(self, unit_env):
        """Created post should be stored with matching timestamps."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())

        # Act
        post = await post_service.create_post(
            author_id=author_id, title="Hello", content="World"
        )

        # Assert
        assert post.title == "Hello"
        assert post.content == "World"
        assert post.author_id == author_id
        assert post.created_at == post.updated_at
        assert post.deleted_at is None

        saved = await post_repo.find_by_id(post.id)
        assert saved == post


class TestGetPostById:
    """Tests for get_post_by_id method."""

    @pytest.mark.asyncio
    async def test_existing_post_returned(self, unit_env):
        """A live post is returned."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        result = await post_service.get_post_by_id(post.id)

        assert result == post

    @pytest.mark.asyncio
    async def test_missing_post_returns_none(self, unit_env):
        """Unknown IDs give None."""
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_id(PostId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_deleted_post_returns_none(self, unit_env):
        """Soft-deleted posts are treated as missing."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(deleted_at=datetime.now()))

        assert await post_service.get_post_by_id(post.id) is None


class TestListPosts:
    """Tests for list_posts and count_posts methods."""

    @pytest.mark.asyncio
    async def test_newest_first_with_pagination(self, unit_env):
        """Posts come back newest first and respect limit/offset."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        base = datetime(2025, 1, 1)

        posts = []
        for i in range(5):
            post = make_post(title=f"Post {i}").model_copy(
                update={"created_at": base + timedelta(hours=i)}
            )
            posts.append(await post_repo.save(post))

        # Act
        first_page = await post_service.list_posts(limit=2, offset=0)
        second_page = await post_service.list_posts(limit=2, offset=2)

        # Assert
        assert [p.title for p in first_page] == ["Post 4", "Post 3"]
        assert [p.title for p in second_page] == ["Post 2", "Post 1"]

    @pytest.mark.asyncio
    async def test_deleted_posts_excluded(self, unit_env):
        """Soft-deleted posts are neither listed nor counted."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        live = await post_repo.save(make_post(title="Live"))
        await post_repo.save(make_post(title="Gone", deleted_at=datetime.now()))

        listed = await post_service.list_posts()

        assert [p.id for p in listed] == [live.id]
        assert await post_service.count_posts() == 1
