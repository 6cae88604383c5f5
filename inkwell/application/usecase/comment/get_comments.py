"""Get comments use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.domain.model import Comment
from inkwell.domain.service import ArticleService, CommentNode, CommentService
from inkwell.domain.value import ArticleId, CommentAuthor


class CommentItem(BaseModel):
    """Comment item in response."""

    id: str
    content: str
    article_id: str
    parent_id: str | None
    author: CommentAuthor
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            content=comment.content,
            article_id=str(comment.article_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author=comment.author,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentTreeItem(CommentItem):
    """Comment with its replies nested recursively."""

    replies: list["CommentTreeItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentTreeItem":
        """Convert a domain tree node to a response model.

        Args:
            node: Domain comment node

        Returns:
            Response model with replies recursively converted
        """
        comment = node.comment
        return cls(
            id=str(comment.id),
            content=comment.content,
            article_id=str(comment.article_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author=comment.author,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request.

    Identify the article either by ID or by slug.
    """

    article_id: str | None = None  # UUID string
    article_slug: str | None = None


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    article_id: str | None
    comments: list[CommentTreeItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting an article's comments as nested threads."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            article_service: Article service for slug lookups
        """
        self.comment_service = comment_service
        self.article_service = article_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Listing never fails: an unknown article, a malformed ID or a storage
        error all produce an empty forest so the page still renders.

        Args:
            request: Get comments request with article ID or slug

        Returns:
            Root comments newest first, replies oldest first
        """
        try:
            article_id = await self._resolve_article_id(request)
            if article_id is None:
                return GetCommentsResponse(article_id=None, comments=[], total=0)

            roots = await self.comment_service.get_comment_tree(article_id)
        except Exception as e:
            logfire.error(
                "Failed to load comments, returning empty list",
                article_id=request.article_id,
                article_slug=request.article_slug,
                error=str(e),
                error_type=type(e).__name__,
            )
            return GetCommentsResponse(
                article_id=request.article_id, comments=[], total=0
            )

        return GetCommentsResponse(
            article_id=str(article_id),
            comments=[CommentTreeItem.from_node(root) for root in roots],
            total=sum(root.count() for root in roots),
        )

    async def _resolve_article_id(
        self, request: GetCommentsRequest
    ) -> ArticleId | None:
        if request.article_id:
            return ArticleId(UUID(request.article_id))

        if request.article_slug:
            article = await self.article_service.get_article_by_slug(
                request.article_slug
            )
            return article.id if article else None

        return None
