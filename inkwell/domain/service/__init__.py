"""Domain services."""

from .article_service import ArticleService
from .base import Service
from .comment_service import MAX_COMMENT_DEPTH, CommentService
from .comment_tree import CommentNode, build_comment_tree
from .jwt_service import JWTService

__all__ = [
    "ArticleService",
    "CommentNode",
    "CommentService",
    "JWTService",
    "MAX_COMMENT_DEPTH",
    "Service",
    "build_comment_tree",
]
