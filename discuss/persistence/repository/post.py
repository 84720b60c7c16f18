"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Post
from discuss.domain.repository import PostRepository
from discuss.domain.value import PostId
from discuss.persistence.mappers import post_to_dict, row_to_post
from discuss.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a non-deleted post exists."""
        stmt = select(
            exists().where(
                posts_table.c.id == post_id,
                posts_table.c.deleted_at.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        found = bool(result.scalar())
        logfire.debug("Post existence check", post_id=str(post_id), exists=found)
        return found

    async def find_all(
        self,
        include_deleted: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, newest first."""
        with logfire.span(
            "post_repository.find_all",
            include_deleted=include_deleted,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table)

            if not include_deleted:
                stmt = stmt.where(posts_table.c.deleted_at.is_(None))

            stmt = (
                stmt.order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count(self, include_deleted: bool = False) -> int:
        """Count posts."""
        stmt = select(func.count()).select_from(posts_table)

        if not include_deleted:
            stmt = stmt.where(posts_table.c.deleted_at.is_(None))

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)
            existing = await self.find_by_id(post.id)

            if existing:
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                stmt = posts_table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post
