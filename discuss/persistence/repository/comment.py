"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import exists, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.error import DanglingReferenceError
from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, PostId, UserId
from discuss.persistence.mappers import row_to_comment
from discuss.persistence.tables import (
    FK_COMMENTS_PARENT_ID,
    FK_COMMENTS_POST_ID,
    comments_table,
)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find all comments for a post, oldest first (ties by ID)."""
        stmt = select(comments_table).where(comments_table.c.post_id == post_id)

        if not include_deleted:
            stmt = stmt.where(comments_table.c.deleted_at.is_(None))

        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def exists(
        self,
        comment_id: CommentId,
        post_id: Optional[PostId] = None,
    ) -> bool:
        """Check whether a comment exists, optionally on a given post."""
        condition = comments_table.c.id == comment_id
        if post_id is not None:
            condition = condition & (comments_table.c.post_id == post_id)

        result = await self.session.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def insert(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a comment; id and timestamps come from column defaults."""
        stmt = (
            insert(comments_table)
            .values(
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
            )
            .returning(comments_table)
        )

        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            message = str(e.orig)
            if FK_COMMENTS_PARENT_ID in message:
                raise DanglingReferenceError("parent_id", str(parent_id)) from e
            if FK_COMMENTS_POST_ID in message:
                raise DanglingReferenceError("post_id", str(post_id)) from e
            logfire.error("Unexpected integrity error on comment insert", error=message)
            raise

        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())
