"""Result — explicit success/failure outcome for use-case execution.

INVARIANT: Exactly one of value/error is populated.
INVARIANT: Reading ``value`` on a failure is a programming defect and raises
:class:`ResultAccessError`; it never returns a default.

Expected failures (validation, not-found, business rules) travel as
``Result.fail``. Unexpected failures are raised, never wrapped here.
"""

from __future__ import annotations

from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_core import to_jsonable_python

from appstate.domain.errors import ResultAccessError

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Tagged outcome: ``Success(data)`` or ``Failure(error)``.

    Build with :meth:`ok` or :meth:`fail`.

    Attributes:
        success: Whether the operation succeeded.
        error: Failure description; None on success.
        data: Success payload; None on failure.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    error: str | None = None
    data: T | None = None

    @model_validator(mode="after")
    def _one_side_populated(self) -> Self:
        if self.success and self.error is not None:
            msg = "A success result cannot carry an error"
            raise ValueError(msg)
        if not self.success and (self.error is None or self.data is not None):
            msg = "A failure result carries an error and no data"
            raise ValueError(msg)
        return self

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        """Wrap a successful outcome."""
        return cls(success=True, data=value)

    @classmethod
    def fail(cls, error: str) -> Result[Any]:
        """Wrap an expected failure with a human-readable description.

        Any message is accepted, the empty string included.
        """
        return cls(success=False, error=error if isinstance(error, str) else str(error))

    @property
    def is_success(self) -> bool:
        return self.success

    @property
    def is_failure(self) -> bool:
        return not self.success

    @property
    def value(self) -> T:
        """The success value. Raises :class:`ResultAccessError` on failure."""
        if not self.success:
            msg = f"Cannot get value of a failure result: {self.error}"
            raise ResultAccessError(msg)
        return self.data  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping for adapters (``{"ok", "value"|"error"}``)."""
        if not self.success:
            return {"ok": False, "error": self.error}
        return {"ok": True, "value": to_jsonable_python(self.data)}
