"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import ArticleId, CommentId, UserId
from inkwell.persistence.mappers import comment_to_dict, row_to_comment
from inkwell.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find every comment on an article."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.article_id == article_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            # parent_id and article_id never change after creation
            comment_dict.pop("parent_id")
            comment_dict.pop("article_id")
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment; replies go with it through ON DELETE CASCADE."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def find_unread(self, limit: int = 20) -> List[Comment]:
        """Find unread comments, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.is_read.is_(False))
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_unread(self) -> int:
        """Count unread comments."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_article_read(
        self, article_id: ArticleId, read_by: UserId, read_at: datetime
    ) -> int:
        """Mark every unread comment on an article as read in one statement."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.article_id == article_id)
            .where(comments_table.c.is_read.is_(False))
            .values(is_read=True, read_at=read_at, read_by=read_by)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
