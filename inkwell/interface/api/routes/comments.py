"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.interface.api.result import resolve_viewer, to_response

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Lengths are checked by the use case after sanitization so that every
    rejection comes back in the same result envelope.
    """

    content: str
    article_id: str
    parent_id: str | None = None  # Parent comment ID for replies
    author_name: str | None = None  # Display name for anonymous comments


@router.post("/comments", response_model=None)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Create a comment on an article or reply to another comment.

    Signed-in callers are attributed from their bearer token; everyone else
    must supply ``author_name``.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Optional bearer token header

    Returns:
        Result envelope with the created comment or the rejection reason
    """
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            article_id=request.article_id,
            content=request.content,
            parent_id=request.parent_id,
            author_name=request.author_name,
            viewer=resolve_viewer(jwt_service, authorization),
        )
    )
    return to_response(result, success_status=status.HTTP_201_CREATED)


@router.get("/comments", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    article_id: str | None = None,
) -> GetCommentsResponse:
    """Get an article's comments as nested threads.

    Args:
        get_comments_use_case: Get comments use case from DI
        article_id: Article UUID

    Returns:
        Root comments newest first, each with replies oldest first
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(article_id=article_id)
    )


@router.get("/articles/{slug}/comments", response_model=GetCommentsResponse)
async def get_article_comments(
    slug: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get an article's comments by the article slug."""
    return await get_comments_use_case.execute(GetCommentsRequest(article_slug=slug))


@router.delete("/comments/{comment_id}", response_model=None)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> JSONResponse:
    """Delete a comment and every reply beneath it.

    Requires an admin bearer token.
    """
    result = await delete_comment_use_case.execute(
        DeleteCommentRequest(
            comment_id=comment_id,
            viewer=resolve_viewer(jwt_service, authorization),
        )
    )
    return to_response(result)
