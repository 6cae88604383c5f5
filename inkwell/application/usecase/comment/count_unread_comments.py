"""Count unread comments use case."""

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.access import require_admin
from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.result import ActionFailure, ActionSuccess
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentErrorCode, Viewer


class UnreadCount(BaseModel):
    """Number of unread comments."""

    count: int


class CountUnreadCommentsUseCase(BaseUseCase):
    """Use case for the admin unread badge."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, viewer: Viewer | None
    ) -> ActionSuccess[UnreadCount] | ActionFailure:
        denied = require_admin(viewer)
        if denied:
            return denied

        try:
            count = await self.comment_service.count_unread()
        except Exception as e:
            logfire.error(
                "Unexpected error counting unread comments",
                error=str(e),
                error_type=type(e).__name__,
            )
            return ActionFailure.of(
                CommentErrorCode.INTERNAL_ERROR, "Failed to count unread comments"
            )

        return ActionSuccess[UnreadCount](data=UnreadCount(count=count))
