"""Mark comments read use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.access import require_admin
from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.result import ActionFailure, ActionSuccess
from inkwell.domain.error import NotFoundError
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentErrorCode, CommentId, Viewer


class MarkCommentsReadRequest(BaseModel):
    """Mark comments read request."""

    comment_id: str  # UUID string of the comment the admin opened
    viewer: Viewer | None = None


class MarkedRead(BaseModel):
    """Outcome of marking an article's comments read."""

    id: str
    marked_count: int


class MarkCommentsReadUseCase(BaseUseCase):
    """Use case for clearing an article's comments from the unread inbox.

    Opening one comment marks it and every other unread comment on the
    same article as read.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize mark comments read use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: MarkCommentsReadRequest
    ) -> ActionSuccess[MarkedRead] | ActionFailure:
        """Execute mark read flow.

        Args:
            request: Request with opened comment ID and caller

        Returns:
            Number of comments marked, or an access / not-found failure
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
            marked = await self.comment_service.mark_article_read(
                comment_id=comment_id,
                read_by=request.viewer.user_id,
            )
        except NotFoundError:
            return ActionFailure.of(
                CommentErrorCode.COMMENT_NOT_FOUND, "Comment not found"
            )
        except Exception as e:
            logfire.error(
                "Unexpected error marking comments read",
                comment_id=request.comment_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return ActionFailure.of(
                CommentErrorCode.INTERNAL_ERROR, "Failed to mark comments read"
            )

        return ActionSuccess[MarkedRead](
            data=MarkedRead(id=str(comment_id), marked_count=marked)
        )
