"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.access import require_admin
from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.result import ActionFailure, ActionSuccess
from inkwell.domain.error import NotFoundError
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentErrorCode, CommentId, Viewer


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    viewer: Viewer | None = None


class DeletedComment(BaseModel):
    """Identifier of the deleted comment."""

    id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and all replies beneath it.

    Only administrators can delete comments.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: DeleteCommentRequest
    ) -> ActionSuccess[DeletedComment] | ActionFailure:
        """Execute delete comment flow.

        Args:
            request: Delete request with comment ID and caller

        Returns:
            Deleted comment ID, or UNAUTHORIZED / FORBIDDEN /
            VALIDATION_ERROR / COMMENT_NOT_FOUND failure
        """
        denied = require_admin(request.viewer)
        if denied:
            return denied

        try:
            comment_id = CommentId(UUID(request.comment_id))
        except ValueError:
            return ActionFailure.of(
                CommentErrorCode.VALIDATION_ERROR, "Invalid comment ID"
            )

        try:
            await self.comment_service.delete_comment(comment_id)
        except NotFoundError:
            return ActionFailure.of(
                CommentErrorCode.COMMENT_NOT_FOUND, "Comment not found"
            )
        except Exception as e:
            logfire.error(
                "Unexpected error deleting comment",
                comment_id=request.comment_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return ActionFailure.of(
                CommentErrorCode.INTERNAL_ERROR, "Failed to delete comment"
            )

        return ActionSuccess[DeletedComment](data=DeletedComment(id=str(comment_id)))
