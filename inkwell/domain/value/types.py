"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from inkwell.domain.value.common import RootValueObject, ValueObject
from inkwell.domain.value.identifiers import UserId


class Role(str, Enum):
    """Role carried in a viewer's access token."""

    USER = "user"
    ADMIN = "admin"


class CommentErrorCode(str, Enum):
    """Error kinds surfaced to callers of the comment operations.

    Every code is a permanent rejection of the request; none are retried.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    ARTICLE_NOT_FOUND = "ARTICLE_NOT_FOUND"
    PARENT_NOT_FOUND = "PARENT_NOT_FOUND"
    INVALID_PARENT = "INVALID_PARENT"
    MAX_DEPTH_EXCEEDED = "MAX_DEPTH_EXCEEDED"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DisplayName(RootValueObject[str]):
    """Free-text name an anonymous commenter signs with."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate display name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Name must be 1-100 characters")
        return v


class RegisteredAuthor(ValueObject):
    """Comment written by a signed-in user."""

    kind: Literal["user"] = "user"
    user_id: UserId
    name: str | None = None


class AnonymousAuthor(ValueObject):
    """Comment written by a visitor who only left a display name."""

    kind: Literal["anonymous"] = "anonymous"
    display_name: DisplayName


# Exactly one variant is ever set; the discriminator makes it checkable on load
CommentAuthor = Annotated[
    Union[RegisteredAuthor, AnonymousAuthor], Field(discriminator="kind")
]


class Viewer(ValueObject):
    """Caller identified from a verified access token."""

    user_id: UserId
    name: str | None = None
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
