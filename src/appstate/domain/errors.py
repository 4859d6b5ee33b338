"""Exception types for programming and infrastructure defects.

Expected failures travel as ``Result.fail``; everything raised from here
is a defect that must propagate to the caller.
"""

from __future__ import annotations


class AppStateError(RuntimeError):
    """Base class for defects raised by appstate."""


class ResultAccessError(AppStateError):
    """Raised when the value of a failed Result is read."""


class StoreStateError(AppStateError):
    """Raised on an invalid module lifecycle transition or a disposed module."""


class StoreInitializationError(AppStateError):
    """Raised when the store registry cannot reach a fully Active state."""
