"""Tagged results returned by write and admin use cases.

Callers never receive exceptions from these use cases: every outcome is either
``ActionSuccess`` carrying data or ``ActionFailure`` carrying an error code.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

from inkwell.domain.value import CommentErrorCode

T = TypeVar("T")


class ActionError(BaseModel):
    """Error detail surfaced verbatim to the caller."""

    message: str
    code: CommentErrorCode


class ActionSuccess(BaseModel, Generic[T]):
    """Successful outcome."""

    success: Literal[True] = True
    data: T


class ActionFailure(BaseModel):
    """Rejected outcome."""

    success: Literal[False] = False
    error: ActionError

    @classmethod
    def of(cls, code: CommentErrorCode, message: str) -> "ActionFailure":
        return cls(error=ActionError(code=code, message=message))

    @property
    def code(self) -> CommentErrorCode:
        return self.error.code
