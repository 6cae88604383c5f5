"""Article domain service."""

import logfire

from inkwell.domain.model import Article
from inkwell.domain.repository import ArticleRepository
from inkwell.domain.value import ArticleId

from .base import Service


class ArticleService(Service):
    """Domain service for article lookups."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def get_article_by_id(self, article_id: ArticleId) -> Article | None:
        """Get an article by ID.

        Args:
            article_id: Article ID

        Returns:
            Article if found, None otherwise
        """
        with logfire.span(
            "article_service.get_article_by_id", article_id=str(article_id)
        ):
            article = await self.article_repository.find_by_id(article_id)
            if not article:
                logfire.warn("Article not found", article_id=str(article_id))
            return article

    async def get_article_by_slug(self, slug: str) -> Article | None:
        """Get an article by slug.

        Args:
            slug: Article URL slug

        Returns:
            Article if found, None otherwise
        """
        with logfire.span("article_service.get_article_by_slug", slug=slug):
            article = await self.article_repository.find_by_slug(slug)
            if not article:
                logfire.warn("Article not found", slug=slug)
            return article

    async def get_articles_by_ids(
        self, article_ids: list[ArticleId]
    ) -> dict[ArticleId, Article]:
        """Batch lookup used to label comments from many articles.

        Args:
            article_ids: Article IDs (duplicates allowed)

        Returns:
            Mapping of found article IDs to articles
        """
        unique_ids = list(dict.fromkeys(article_ids))
        with logfire.span("article_service.get_articles_by_ids", count=len(unique_ids)):
            if not unique_ids:
                return {}
            return await self.article_repository.find_by_ids(unique_ids)
