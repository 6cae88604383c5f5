"""Comment entity.

Comments are threaded discussions on articles. A comment either starts a
thread (no parent) or replies to another comment on the same article.
Nesting is capped at write time by the comment service.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import ArticleId, CommentAuthor, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on an article or a reply to another comment.

    Threading is managed through parent_id only: None for a root comment,
    otherwise the id of an existing comment on the same article. The parent
    reference never changes after creation, so comments always form a forest.
    """

    id: CommentId
    article_id: ArticleId
    parent_id: Optional[CommentId] = None
    author: CommentAuthor
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    # Admin moderation inbox
    is_read: bool = False
    read_at: Optional[datetime] = None
    read_by: Optional[UserId] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
