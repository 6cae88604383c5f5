"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from inkwell.application.usecase.result import ActionFailure, ActionSuccess
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import ArticleId, CommentErrorCode, Role
from tests.conftest import at, make_comment, make_viewer
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_admin_deletes_comment_and_replies(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        article_id = ArticleId(uuid4())
        root = make_comment(article_id, created_at=at(1))
        reply = make_comment(article_id, parent_id=root.id, created_at=at(2))
        await comment_repo.save(root)
        await comment_repo.save(reply)

        # Act
        result = await use_case.execute(
            DeleteCommentRequest(
                comment_id=str(root.id), viewer=make_viewer(role=Role.ADMIN)
            )
        )

        # Assert
        assert isinstance(result, ActionSuccess)
        assert result.data.id == str(root.id)
        assert await comment_repo.find_by_article(article_id) == []

    @pytest.mark.asyncio
    async def test_anonymous_caller_unauthorized(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(ArticleId(uuid4()))
        await comment_repo.save(comment)

        result = await use_case.execute(DeleteCommentRequest(comment_id=str(comment.id)))

        assert isinstance(result, ActionFailure)
        assert result.code == CommentErrorCode.UNAUTHORIZED
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_regular_user_forbidden(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(ArticleId(uuid4()))
        await comment_repo.save(comment)

        result = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), viewer=make_viewer())
        )

        assert isinstance(result, ActionFailure)
        assert result.code == CommentErrorCode.FORBIDDEN
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_missing_comment_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        result = await use_case.execute(
            DeleteCommentRequest(
                comment_id=str(uuid4()), viewer=make_viewer(role=Role.ADMIN)
            )
        )

        assert isinstance(result, ActionFailure)
        assert result.code == CommentErrorCode.COMMENT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_malformed_id_rejected(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        result = await use_case.execute(
            DeleteCommentRequest(comment_id="42", viewer=make_viewer(role=Role.ADMIN))
        )

        assert isinstance(result, ActionFailure)
        assert result.code == CommentErrorCode.VALIDATION_ERROR
