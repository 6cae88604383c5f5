"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import ArticleId, CommentId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find every comment on an article."""
        comments = [c for c in self._comments.values() if c.article_id == article_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and its descendants, like ON DELETE CASCADE."""
        pending = [comment_id]
        while pending:
            current = pending.pop()
            if self._comments.pop(current, None) is None:
                continue
            pending.extend(
                c.id for c in self._comments.values() if c.parent_id == current
            )

    async def find_unread(self, limit: int = 20) -> list[Comment]:
        """Find unread comments, newest first."""
        comments = [c for c in self._comments.values() if not c.is_read]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[:limit]

    async def count_unread(self) -> int:
        """Count unread comments."""
        return sum(1 for c in self._comments.values() if not c.is_read)

    async def mark_article_read(
        self, article_id: ArticleId, read_by: UserId, read_at: datetime
    ) -> int:
        """Mark every unread comment on an article as read."""
        marked = 0
        for comment in list(self._comments.values()):
            if comment.article_id == article_id and not comment.is_read:
                # Comments are immutable, store an updated copy
                self._comments[comment.id] = comment.model_copy(
                    update={"is_read": True, "read_at": read_at, "read_by": read_by}
                )
                marked += 1
        return marked
