"""Domain model entities for Inkwell."""

from inkwell.domain.model.article import Article
from inkwell.domain.model.comment import Comment

__all__ = [
    "Article",
    "Comment",
]
