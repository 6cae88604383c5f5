"""Get unread comments use case (admin moderation inbox)."""

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.access import require_admin
from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.get_comments import CommentItem
from inkwell.application.usecase.result import ActionFailure, ActionSuccess
from inkwell.config import CommentSettings
from inkwell.domain.model import Article
from inkwell.domain.service import ArticleService, CommentService
from inkwell.domain.value import CommentErrorCode, Viewer


class ArticleSummary(BaseModel):
    """Article a comment belongs to."""

    id: str
    slug: str
    title: str

    @classmethod
    def from_domain(cls, article: Article) -> "ArticleSummary":
        return cls(id=str(article.id), slug=article.slug, title=article.title)


class UnreadCommentItem(CommentItem):
    """Unread comment with the article it was posted on."""

    article: ArticleSummary | None


class GetUnreadCommentsRequest(BaseModel):
    """Get unread comments request."""

    viewer: Viewer | None = None
    limit: int | None = None


class UnreadComments(BaseModel):
    """Unread comments, newest first."""

    comments: list[UnreadCommentItem]


class GetUnreadCommentsUseCase(BaseUseCase):
    """Use case for listing unread comments across all articles."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get unread comments use case.

        Args:
            comment_service: Comment domain service
            article_service: Article service for labelling comments
            comment_settings: Inbox page size limits
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.comment_settings = comment_settings

    def _clamp_limit(self, limit: int | None) -> int:
        if not limit:
            return self.comment_settings.unread_default_limit
        return min(max(limit, 1), self.comment_settings.unread_max_limit)

    async def execute(
        self, request: GetUnreadCommentsRequest
    ) -> ActionSuccess[UnreadComments] | ActionFailure:
        """Execute get unread comments flow.

        Args:
            request: Request with caller and optional page size

        Returns:
            Unread comments with article details, or an access failure
        """
        denied = require_admin(request.viewer)
        if denied:
            return denied

        try:
            comments = await self.comment_service.get_unread_comments(
                limit=self._clamp_limit(request.limit)
            )
            articles = await self.article_service.get_articles_by_ids(
                [comment.article_id for comment in comments]
            )
        except Exception as e:
            logfire.error(
                "Unexpected error listing unread comments",
                error=str(e),
                error_type=type(e).__name__,
            )
            return ActionFailure.of(
                CommentErrorCode.INTERNAL_ERROR, "Failed to load unread comments"
            )

        items = []
        for comment in comments:
            article = articles.get(comment.article_id)
            items.append(
                UnreadCommentItem(
                    **CommentItem.from_domain(comment).model_dump(),
                    article=ArticleSummary.from_domain(article) if article else None,
                )
            )

        return ActionSuccess[UnreadComments](data=UnreadComments(comments=items))
