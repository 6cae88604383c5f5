"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from inkwell.domain.error import CommentRejectedError, NotFoundError
from inkwell.domain.model import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import (
    ArticleId,
    CommentAuthor,
    CommentErrorCode,
    CommentId,
    UserId,
)

from .base import Service
from .comment_tree import CommentNode, build_comment_tree

# Root comments are depth 0, so three levels: root, reply, reply-to-reply
MAX_COMMENT_DEPTH = 3


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_depth: int = MAX_COMMENT_DEPTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_depth: Nesting bound; a new comment's depth must stay below it
        """
        self.comment_repository = comment_repository
        self.max_depth = max_depth

    async def check_reply_depth(
        self, article_id: ArticleId, parent_id: CommentId | None
    ) -> int:
        """Work out the depth a new comment would have, rejecting it if invalid.

        The walk up the parent chain reads at most ``max_depth`` comments,
        so a corrupted, overly long chain cannot cause an unbounded traversal.

        Args:
            article_id: Article the new comment targets
            parent_id: Comment being replied to (None for a root comment)

        Returns:
            Depth of the new comment (0 for a root comment)

        Raises:
            CommentRejectedError: PARENT_NOT_FOUND, INVALID_PARENT or
                MAX_DEPTH_EXCEEDED
        """
        if parent_id is None:
            return 0

        parent = await self.comment_repository.find_by_id(parent_id)
        if not parent:
            logfire.warn(
                "Parent comment not found",
                parent_id=str(parent_id),
                article_id=str(article_id),
            )
            raise CommentRejectedError(
                CommentErrorCode.PARENT_NOT_FOUND, "Parent comment not found"
            )

        if parent.article_id != article_id:
            logfire.warn(
                "Parent comment does not belong to article",
                parent_id=str(parent_id),
                parent_article_id=str(parent.article_id),
                target_article_id=str(article_id),
            )
            raise CommentRejectedError(
                CommentErrorCode.INVALID_PARENT,
                "Parent comment does not belong to this article",
            )

        depth = 1
        current_id = parent.parent_id
        while current_id is not None and depth < self.max_depth:
            ancestor = await self.comment_repository.find_by_id(current_id)
            if ancestor is None:
                # Broken chain: count what was walked
                break
            current_id = ancestor.parent_id
            depth += 1

        if depth >= self.max_depth:
            logfire.info(
                "Reply rejected at maximum depth",
                parent_id=str(parent_id),
                depth=depth,
                max_depth=self.max_depth,
            )
            raise CommentRejectedError(
                CommentErrorCode.MAX_DEPTH_EXCEEDED,
                f"Maximum reply depth reached ({self.max_depth} levels)",
            )

        return depth

    async def create_comment(
        self,
        article_id: ArticleId,
        author: CommentAuthor,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an article or reply to another comment.

        Args:
            article_id: Article ID (must already exist)
            author: Registered user or anonymous display name
            content: Sanitized comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            CommentRejectedError: If the parent is invalid or too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=str(article_id),
            author_kind=author.kind,
            parent_id=str(parent_id) if parent_id else None,
        ):
            depth = await self.check_reply_depth(article_id, parent_id)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article_id,
                parent_id=parent_id,
                author=author,
                content=content,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article_id),
                author_kind=author.kind,
                depth=depth,
            )
            return saved

    async def get_comment_tree(self, article_id: ArticleId) -> list[CommentNode]:
        """Get an article's comments as a forest of threads.

        Args:
            article_id: Article ID

        Returns:
            Root nodes, newest first, each with replies oldest first
        """
        with logfire.span(
            "comment_service.get_comment_tree", article_id=str(article_id)
        ):
            comments = await self.comment_repository.find_by_article(article_id)
            roots = build_comment_tree(comments)
            logfire.info(
                "Built comment tree",
                article_id=str(article_id),
                count=len(comments),
                root_count=len(roots),
            )
            return roots

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment together with every reply beneath it.

        Args:
            comment_id: Comment ID

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                article_id=str(comment.article_id),
            )

    async def get_unread_comments(self, limit: int) -> list[Comment]:
        """Get the newest unread comments across all articles.

        Args:
            limit: Maximum number of comments

        Returns:
            Unread comments, newest first
        """
        with logfire.span("comment_service.get_unread_comments", limit=limit):
            comments = await self.comment_repository.find_unread(limit=limit)
            logfire.info("Unread comments retrieved", count=len(comments))
            return comments

    async def count_unread(self) -> int:
        """Count unread comments across all articles."""
        with logfire.span("comment_service.count_unread"):
            return await self.comment_repository.count_unread()

    async def mark_article_read(self, comment_id: CommentId, read_by: UserId) -> int:
        """Mark a comment and all other unread comments on its article as read.

        An admin opening one comment reads the whole discussion, so the
        entire article's inbox is cleared.

        Args:
            comment_id: Comment the admin opened
            read_by: Admin user ID

        Returns:
            Number of comments marked as read

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.mark_article_read",
            comment_id=str(comment_id),
            read_by=str(read_by),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn(
                    "Comment not found for mark read", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            marked = await self.comment_repository.mark_article_read(
                article_id=comment.article_id,
                read_by=read_by,
                read_at=datetime.now(),
            )
            logfire.info(
                "Comments marked read",
                article_id=str(comment.article_id),
                marked=marked,
            )
            return marked
