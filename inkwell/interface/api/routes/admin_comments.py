"""Admin moderation routes for comments."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from fastapi.responses import JSONResponse

from inkwell.application.usecase.comment import (
    CountUnreadCommentsUseCase,
    GetUnreadCommentsRequest,
    GetUnreadCommentsUseCase,
    MarkCommentsReadRequest,
    MarkCommentsReadUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.interface.api.result import resolve_viewer, to_response

router = APIRouter(
    prefix="/admin/comments", tags=["admin"], route_class=DishkaRoute
)


@router.get("/unread", response_model=None)
async def get_unread_comments(
    get_unread_comments_use_case: FromDishka[GetUnreadCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """List unread comments across all articles, newest first.

    Args:
        get_unread_comments_use_case: Use case from DI
        jwt_service: JWT service for token verification (injected)
        limit: Page size (default 20, clamped to 1..100)
        authorization: Admin bearer token header

    Returns:
        Result envelope with unread comments and their articles
    """
    result = await get_unread_comments_use_case.execute(
        GetUnreadCommentsRequest(
            viewer=resolve_viewer(jwt_service, authorization),
            limit=limit,
        )
    )
    return to_response(result)


@router.get("/unread-count", response_model=None)
async def count_unread_comments(
    count_unread_comments_use_case: FromDishka[CountUnreadCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Count unread comments for the admin badge."""
    result = await count_unread_comments_use_case.execute(
        resolve_viewer(jwt_service, authorization)
    )
    return to_response(result)


@router.put("/{comment_id}/read", response_model=None)
async def mark_comments_read(
    comment_id: str,
    mark_comments_read_use_case: FromDishka[MarkCommentsReadUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Mark a comment and the rest of its article's unread comments as read."""
    result = await mark_comments_read_use_case.execute(
        MarkCommentsReadRequest(
            comment_id=comment_id,
            viewer=resolve_viewer(jwt_service, authorization),
        )
    )
    return to_response(result)
