"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import ArticleId, CommentId, UserId
from inkwell.domain.value.types import (
    AnonymousAuthor,
    CommentAuthor,
    CommentErrorCode,
    DisplayName,
    RegisteredAuthor,
    Role,
    Viewer,
)

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    # Types
    "AnonymousAuthor",
    "CommentAuthor",
    "CommentErrorCode",
    "DisplayName",
    "RegisteredAuthor",
    "Role",
    "Viewer",
]
