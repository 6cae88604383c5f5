"""Comment use cases."""

from .count_unread_comments import CountUnreadCommentsUseCase, UnreadCount
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase, DeletedComment
from .get_comments import (
    CommentItem,
    CommentTreeItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .get_unread_comments import (
    GetUnreadCommentsRequest,
    GetUnreadCommentsUseCase,
    UnreadCommentItem,
    UnreadComments,
)
from .mark_comments_read import (
    MarkCommentsReadRequest,
    MarkCommentsReadUseCase,
    MarkedRead,
)

__all__ = [
    "CommentItem",
    "CommentTreeItem",
    "CountUnreadCommentsUseCase",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "DeletedComment",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetUnreadCommentsRequest",
    "GetUnreadCommentsUseCase",
    "MarkCommentsReadRequest",
    "MarkCommentsReadUseCase",
    "MarkedRead",
    "UnreadCommentItem",
    "UnreadComments",
    "UnreadCount",
]
