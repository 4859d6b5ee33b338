"""UseCase — the asynchronous execution contract for application operations.

INVARIANT: Expected failures (invalid request, business-rule violation)
are returned as ``Result.fail``. Infrastructure failures are raised and
propagate to the caller's error boundary; they are never folded into a
Result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from appstate.domain.result import Result

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """Abstract base for all application-layer operations.

    Usage::

        class ToggleTheme(UseCase[None, Theme]):
            async def execute(self, request: None) -> Result[Theme]:
                ...

    Callers must await ``execute`` before inspecting the Result.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> Result[ResponseT]:
        """Run the operation for *request*."""
