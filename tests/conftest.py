"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from inkwell.domain.model import Article, Comment
from inkwell.domain.value import (
    AnonymousAuthor,
    ArticleId,
    CommentAuthor,
    CommentId,
    DisplayName,
    Role,
    UserId,
    Viewer,
)

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """Timestamp a fixed number of minutes after BASE_TIME."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_article(slug: str = "hello-world", title: str = "Hello World") -> Article:
    """Helper to build an article with a fresh ID."""
    return Article(id=ArticleId(uuid4()), slug=slug, title=title)


def make_comment(
    article_id: ArticleId,
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
    content: str = "A comment",
    author: CommentAuthor | None = None,
    is_read: bool = False,
) -> Comment:
    """Helper to build a comment with a fresh ID.

    Defaults to an anonymous author so no user record is needed.
    """
    created_at = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        article_id=article_id,
        parent_id=parent_id,
        author=author or AnonymousAuthor(display_name=DisplayName("Reader")),
        content=content,
        created_at=created_at,
        updated_at=created_at,
        is_read=is_read,
    )


def make_viewer(role: Role = Role.USER, name: str | None = "Ada") -> Viewer:
    """Helper to build a signed-in caller."""
    return Viewer(user_id=UserId(uuid4()), name=name, role=role)
