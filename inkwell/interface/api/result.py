"""Translate use case results into HTTP responses."""

from fastapi import status
from fastapi.responses import JSONResponse

from inkwell.application.usecase.result import ActionFailure, ActionSuccess
from inkwell.domain.service import JWTService
from inkwell.domain.value import CommentErrorCode, Viewer

ERROR_STATUS: dict[CommentErrorCode, int] = {
    CommentErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    CommentErrorCode.INVALID_PARENT: status.HTTP_400_BAD_REQUEST,
    CommentErrorCode.MAX_DEPTH_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    CommentErrorCode.ARTICLE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CommentErrorCode.PARENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CommentErrorCode.COMMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CommentErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    CommentErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    CommentErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_response(
    result: ActionSuccess | ActionFailure,
    success_status: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Render a tagged result as a JSON envelope with a matching status code.

    Args:
        result: Use case outcome
        success_status: Status code to use when the outcome is a success

    Returns:
        JSON response carrying ``{"success": ..., "data" | "error": ...}``
    """
    if isinstance(result, ActionFailure):
        status_code = ERROR_STATUS.get(
            result.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    else:
        status_code = success_status

    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


def resolve_viewer(jwt_service: JWTService, authorization: str | None) -> Viewer | None:
    """Identify the caller from an ``Authorization: Bearer <token>`` header.

    Missing, malformed or invalid credentials all resolve to no viewer.
    """
    if not authorization:
        return None

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None

    return jwt_service.get_viewer_from_token(token.strip())
