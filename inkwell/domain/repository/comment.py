"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import ArticleId, CommentId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find every comment on an article, replies included.

        Ordering is not part of the contract; the tree builder sorts.

        Args:
            article_id: The article ID

        Returns:
            Flat list of the article's comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and all of its descendants.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def find_unread(self, limit: int = 20) -> List[Comment]:
        """Find unread comments across all articles, newest first.

        Args:
            limit: Maximum number of comments to return

        Returns:
            Unread comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_unread(self) -> int:
        """Count unread comments across all articles."""
        pass

    @abstractmethod
    async def mark_article_read(
        self, article_id: ArticleId, read_by: UserId, read_at: datetime
    ) -> int:
        """Mark every unread comment on an article as read.

        Args:
            article_id: The article whose comments are marked
            read_by: Admin who read them
            read_at: When they were read

        Returns:
            Number of comments marked
        """
        pass
