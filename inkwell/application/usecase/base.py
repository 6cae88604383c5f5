"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base for use cases that report outcomes as tagged results.

    ``execute`` returns ``ActionSuccess`` or ``ActionFailure``; domain
    exceptions are translated here and never reach the interface layer.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
