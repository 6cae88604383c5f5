"""In-memory article repository for testing."""

from typing import Iterable, Optional

from inkwell.domain.model.article import Article
from inkwell.domain.repository.article import ArticleRepository
from inkwell.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def find_by_slug(self, slug: str) -> Optional[Article]:
        """Find an article by slug."""
        return next((a for a in self._articles.values() if a.slug == slug), None)

    async def find_by_ids(
        self, article_ids: Iterable[ArticleId]
    ) -> dict[ArticleId, Article]:
        """Batch lookup of articles."""
        return {
            article_id: self._articles[article_id]
            for article_id in article_ids
            if article_id in self._articles
        }

    async def save(self, article: Article) -> Article:
        """Save or update an article."""
        self._articles[article.id] = article
        return article
