"""Unit tests for PostgresCommentRepository error translation."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from discuss.domain.error import DanglingReferenceError
from discuss.domain.value import CommentId, PostId, UserId
from discuss.persistence.repository import PostgresCommentRepository
from discuss.persistence.tables import FK_COMMENTS_PARENT_ID, FK_COMMENTS_POST_ID


class FailingSession:
    """Session stand-in whose execute raises the given error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.statements = []

    async def execute(self, statement):
        self.statements.append(statement)
        raise self.error

    async def flush(self) -> None:
        raise AssertionError("flush should not be reached")


def _fk_violation(constraint: str) -> IntegrityError:
    """IntegrityError shaped like asyncpg's foreign key violation."""
    orig = Exception(
        f'insert or update on table "comments" violates foreign key '
        f'constraint "{constraint}"'
    )
    return IntegrityError("INSERT INTO comments ...", {}, orig)


class TestInsertIntegrityErrors:
    """Tests for insert's foreign key translation."""

    @pytest.mark.asyncio
    async def test_parent_fk_violation_becomes_dangling_parent(self):
        """A parent_id constraint violation names the parent."""
        # Arrange
        session = FailingSession(_fk_violation(FK_COMMENTS_PARENT_ID))
        repo = PostgresCommentRepository(session)
        parent_id = CommentId(uuid4())

        # Act & Assert
        with pytest.raises(DanglingReferenceError) as exc_info:
            await repo.insert(
                post_id=PostId(uuid4()),
                author_id=UserId(uuid4()),
                content="Reply",
                parent_id=parent_id,
            )

        assert exc_info.value.reference == "parent_id"
        assert exc_info.value.identifier == str(parent_id)
        assert isinstance(exc_info.value.__cause__, IntegrityError)

    @pytest.mark.asyncio
    async def test_post_fk_violation_becomes_dangling_post(self):
        """A post_id constraint violation names the post."""
        session = FailingSession(_fk_violation(FK_COMMENTS_POST_ID))
        repo = PostgresCommentRepository(session)
        post_id = PostId(uuid4())

        with pytest.raises(DanglingReferenceError) as exc_info:
            await repo.insert(
                post_id=post_id, author_id=UserId(uuid4()), content="Hello"
            )

        assert exc_info.value.reference == "post_id"
        assert exc_info.value.identifier == str(post_id)

    @pytest.mark.asyncio
    async def test_other_integrity_error_propagates(self):
        """Violations of other constraints are re-raised unchanged."""
        error = IntegrityError(
            "INSERT INTO comments ...",
            {},
            Exception('null value in column "content" violates not-null constraint'),
        )
        repo = PostgresCommentRepository(FailingSession(error))

        with pytest.raises(IntegrityError) as exc_info:
            await repo.insert(
                post_id=PostId(uuid4()), author_id=UserId(uuid4()), content="Hello"
            )

        assert exc_info.value is error
