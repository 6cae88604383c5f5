"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.comment import (
    CountUnreadCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetUnreadCommentsUseCase,
    MarkCommentsReadUseCase,
)
from inkwell.config import CommentSettings
from inkwell.domain.service import ArticleService, CommentService
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        comment_settings: CommentSettings,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            article_service=article_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            article_service=article_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_get_unread_comments_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        comment_settings: CommentSettings,
    ) -> GetUnreadCommentsUseCase:
        """Provide get unread comments use case."""
        return GetUnreadCommentsUseCase(
            comment_service=comment_service,
            article_service=article_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_count_unread_comments_use_case(
        self, comment_service: CommentService
    ) -> CountUnreadCommentsUseCase:
        """Provide count unread comments use case."""
        return CountUnreadCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_comments_read_use_case(
        self, comment_service: CommentService
    ) -> MarkCommentsReadUseCase:
        """Provide mark comments read use case."""
        return MarkCommentsReadUseCase(comment_service=comment_service)
