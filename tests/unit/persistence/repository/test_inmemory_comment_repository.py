"""Unit tests for the in-memory comment repository."""

from datetime import datetime
from uuid import uuid4

import pytest

from discuss.domain.error import DanglingReferenceError
from discuss.domain.value import CommentId, PostId, UserId
from discuss.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment, make_id


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_insert_assigns_increasing_timestamps(self):
        """Back-to-back inserts never share a created_at."""
        repo = InMemoryCommentRepository()
        post_id = PostId(uuid4())
        author_id = UserId(uuid4())

        inserted = [
            await repo.insert(post_id, author_id, f"comment {i}") for i in range(50)
        ]

        timestamps = [c.created_at for c in inserted]
        assert timestamps == sorted(timestamps)
        assert len(set(timestamps)) == len(timestamps)
        assert await repo.find_by_post(post_id) == inserted

    @pytest.mark.asyncio
    async def test_equal_timestamps_ordered_by_id(self):
        """Comments created at the same instant are ordered by ID."""
        repo = InMemoryCommentRepository()
        await repo.save(make_comment(3, t=5))
        await repo.save(make_comment(1, t=5))
        await repo.save(make_comment(2, t=1))

        comments = await repo.find_by_post(PostId(make_id(1000)))

        assert [c.id for c in comments] == [make_id(2), make_id(1), make_id(3)]

    @pytest.mark.asyncio
    async def test_insert_with_unknown_parent_raises(self):
        """Parent ID behaves like a foreign key."""
        repo = InMemoryCommentRepository()
        parent_id = CommentId(uuid4())

        with pytest.raises(DanglingReferenceError) as exc_info:
            await repo.insert(
                PostId(uuid4()), UserId(uuid4()), "Reply", parent_id=parent_id
            )

        assert exc_info.value.reference == "parent_id"
        assert exc_info.value.identifier == str(parent_id)

    @pytest.mark.asyncio
    async def test_exists_scoped_to_post(self):
        """exists with a post ID only matches comments on that post."""
        repo = InMemoryCommentRepository()
        comment = await repo.save(make_comment(1))
        other_post = PostId(uuid4())

        assert await repo.exists(comment.id)
        assert await repo.exists(comment.id, post_id=comment.post_id)
        assert not await repo.exists(comment.id, post_id=other_post)
        assert not await repo.exists(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_find_by_post_hides_deleted_by_default(self):
        """Soft-deleted comments are only returned when asked for."""
        repo = InMemoryCommentRepository()
        live = await repo.save(make_comment(1, t=1))
        gone = await repo.save(
            make_comment(2, t=2).model_copy(update={"deleted_at": datetime(2025, 2, 1)})
        )

        visible = await repo.find_by_post(live.post_id)
        everything = await repo.find_by_post(live.post_id, include_deleted=True)

        assert visible == [live]
        assert everything == [live, gone]
