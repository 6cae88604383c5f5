"""PostgreSQL repository implementations."""

from inkwell.persistence.repository.article import PostgresArticleRepository
from inkwell.persistence.repository.comment import PostgresCommentRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCommentRepository",
]
