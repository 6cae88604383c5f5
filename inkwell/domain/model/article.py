"""Article entity.

Articles are authored and published elsewhere on the site. The comment
service only needs to know that an article exists and how to name it.
"""

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import ArticleId


class Article(DomainModel):
    """Read-only view of a published article."""

    id: ArticleId
    slug: str = Field(min_length=1, max_length=200)
    title: str = Field(min_length=1, max_length=300)
