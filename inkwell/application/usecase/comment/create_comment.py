"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, ValidationError, field_validator

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.get_comments import CommentItem
from inkwell.application.usecase.result import ActionFailure, ActionSuccess
from inkwell.config import CommentSettings
from inkwell.domain.error import CommentRejectedError
from inkwell.domain.service import ArticleService, CommentService
from inkwell.domain.value import (
    AnonymousAuthor,
    ArticleId,
    CommentAuthor,
    CommentErrorCode,
    CommentId,
    DisplayName,
    RegisteredAuthor,
    Viewer,
)
from inkwell.util.text import sanitize_text


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: str  # UUID string
    content: str
    parent_id: str | None = None  # Parent comment ID for replies
    author_name: str | None = None  # Required when there is no viewer
    viewer: Viewer | None = None  # Caller from a verified token, if signed in


class _ValidatedComment(BaseModel):
    """Create input after parsing and sanitization."""

    article_id: UUID
    content: str
    parent_id: UUID | None = None

    @field_validator("content")
    @classmethod
    def sanitize_content(cls, v: str) -> str:
        """Strip markup and reject content that is empty afterwards."""
        v = sanitize_text(v)
        if not v:
            raise ValueError("Comment content is required")
        return v

    @field_validator("parent_id", mode="before")
    @classmethod
    def blank_parent_is_root(cls, v: str | None) -> str | None:
        return v or None


def _first_error_message(error: ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return "Validation failed"
    return errors[0]["msg"].removeprefix("Value error, ")


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on an article or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            comment_settings: Comment limits
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.comment_settings = comment_settings

    async def execute(
        self, request: CreateCommentRequest
    ) -> ActionSuccess[CommentItem] | ActionFailure:
        """Execute create comment flow.

        Steps:
        1. Validate and sanitize input, resolve the author
        2. Verify the article exists
        3. Create comment via comment service (parent and depth checks)

        Args:
            request: Create comment request

        Returns:
            Created comment, or a failure carrying the error code
        """
        try:
            validated = _ValidatedComment(
                article_id=request.article_id,
                content=request.content,
                parent_id=request.parent_id,
            )
        except ValidationError as e:
            return ActionFailure.of(
                CommentErrorCode.VALIDATION_ERROR, _first_error_message(e)
            )

        max_length = self.comment_settings.max_content_length
        if len(validated.content) > max_length:
            return ActionFailure.of(
                CommentErrorCode.VALIDATION_ERROR,
                f"Comment content must be less than {max_length} characters",
            )

        author = self._resolve_author(request)
        if isinstance(author, ActionFailure):
            return author

        try:
            article_id = ArticleId(validated.article_id)
            article = await self.article_service.get_article_by_id(article_id)
            if not article:
                return ActionFailure.of(
                    CommentErrorCode.ARTICLE_NOT_FOUND, "Article not found"
                )

            comment = await self.comment_service.create_comment(
                article_id=article_id,
                author=author,
                content=validated.content,
                parent_id=CommentId(validated.parent_id)
                if validated.parent_id
                else None,
            )
        except CommentRejectedError as e:
            return ActionFailure.of(e.code, e.message)
        except Exception as e:
            logfire.error(
                "Unexpected error creating comment",
                article_id=request.article_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return ActionFailure.of(
                CommentErrorCode.INTERNAL_ERROR, "Failed to create comment"
            )

        return ActionSuccess[CommentItem](data=CommentItem.from_domain(comment))

    @staticmethod
    def _resolve_author(
        request: CreateCommentRequest,
    ) -> CommentAuthor | ActionFailure:
        # A signed-in viewer always wins over a typed-in name
        if request.viewer is not None:
            return RegisteredAuthor(
                user_id=request.viewer.user_id, name=request.viewer.name
            )

        if not request.author_name:
            return ActionFailure.of(
                CommentErrorCode.VALIDATION_ERROR,
                "Name is required for anonymous comments",
            )

        try:
            return AnonymousAuthor(display_name=DisplayName(request.author_name))
        except ValidationError as e:
            return ActionFailure.of(
                CommentErrorCode.VALIDATION_ERROR, _first_error_message(e)
            )
