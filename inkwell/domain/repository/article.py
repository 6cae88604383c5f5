"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from inkwell.domain.model.article import Article
from inkwell.domain.value import ArticleId


class ArticleRepository(ABC):
    """Repository for Article lookups.

    Articles are owned by the publishing side of the site; comments only read them.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Article]:
        """Find an article by its URL slug.

        Args:
            slug: The article's slug

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, article_ids: Iterable[ArticleId]
    ) -> Dict[ArticleId, Article]:
        """Batch lookup of articles.

        Args:
            article_ids: IDs to look up

        Returns:
            Mapping of found IDs to articles (missing IDs are absent)
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        Args:
            article: The article to save

        Returns:
            The saved article
        """
        pass
