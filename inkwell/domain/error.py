"""Domain layer errors."""

from inkwell.domain.value import CommentErrorCode


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CommentRejectedError(DomainError):
    """Raised when a comment write is refused by a business rule.

    Carries the error code callers receive, so the use case layer can turn it
    into a failure result without inspecting the message.
    """

    def __init__(self, code: CommentErrorCode, message: str):
        self.code = code
        self.message = message
        super().__init__(message)
