"""Role checks shared by admin use cases."""

from inkwell.application.usecase.result import ActionFailure
from inkwell.domain.value import CommentErrorCode, Viewer


def require_admin(viewer: Viewer | None) -> ActionFailure | None:
    """Return a failure unless the viewer is an administrator.

    Args:
        viewer: Caller resolved from the access token, if any

    Returns:
        UNAUTHORIZED or FORBIDDEN failure, or None when access is granted
    """
    if viewer is None:
        return ActionFailure.of(
            CommentErrorCode.UNAUTHORIZED, "Authentication required"
        )
    if not viewer.is_admin:
        return ActionFailure.of(CommentErrorCode.FORBIDDEN, "Admin role required")
    return None
