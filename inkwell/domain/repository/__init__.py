"""Repository interfaces for Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from inkwell.domain.repository.article import ArticleRepository
from inkwell.domain.repository.comment import CommentRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
]
