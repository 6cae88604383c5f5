"""PostgreSQL implementation of Article repository."""

from typing import Dict, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Article
from inkwell.domain.repository import ArticleRepository
from inkwell.domain.value import ArticleId
from inkwell.persistence.mappers import article_to_dict, row_to_article
from inkwell.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_by_slug(self, slug: str) -> Optional[Article]:
        """Find an article by slug."""
        stmt = select(articles_table).where(articles_table.c.slug == slug)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_by_ids(
        self, article_ids: Iterable[ArticleId]
    ) -> Dict[ArticleId, Article]:
        """Batch lookup of articles."""
        ids = list(article_ids)
        if not ids:
            return {}

        stmt = select(articles_table).where(articles_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        articles = [row_to_article(row._asdict()) for row in result.fetchall()]
        return {article.id: article for article in articles}

    async def save(self, article: Article) -> Article:
        """Insert an article, or update slug and title if it exists."""
        values = article_to_dict(article)
        stmt = insert(articles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[articles_table.c.id],
            set_={"slug": stmt.excluded.slug, "title": stmt.excluded.title},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return article
