"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from inkwell.domain.model import Article, Comment
from inkwell.domain.value import (
    AnonymousAuthor,
    ArticleId,
    CommentId,
    DisplayName,
    RegisteredAuthor,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(_uuid(row["id"])),
        slug=row["slug"],
        title=row["title"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return article.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    A row with a user_id is a registered author (author_name is the
    denormalized user name); without one, author_name is the anonymous
    display name.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    if row.get("user_id"):
        author = RegisteredAuthor(
            user_id=UserId(_uuid(row["user_id"])),
            name=row.get("author_name"),
        )
    else:
        author = AnonymousAuthor(display_name=DisplayName(row["author_name"]))

    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        author=author,
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        is_read=row.get("is_read", False),
        read_at=row.get("read_at"),
        read_by=UserId(_uuid(row["read_by"])) if row.get("read_by") else None,
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    author = comment.author
    if isinstance(author, RegisteredAuthor):
        user_id, author_name = author.user_id, author.name
    else:
        user_id, author_name = None, author.display_name.root

    return {
        "id": comment.id,
        "article_id": comment.article_id,
        "parent_id": comment.parent_id,
        "user_id": user_id,
        "author_name": author_name,
        "content": comment.content,
        "is_read": comment.is_read,
        "read_at": comment.read_at,
        "read_by": comment.read_by,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }
