"""Store-module lifecycle.

Construction hydrates persisted fields (``initialized``), the registry then
runs the module's startup logic once (``active``), and session end
disposes it. A disposed module never comes back.
"""

from __future__ import annotations

from enum import StrEnum


class ModuleStatus(StrEnum):
    """Lifecycle status of a store module."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    ACTIVE = "active"
    DISPOSED = "disposed"


MODULE_TRANSITIONS: dict[str, list[str]] = {
    "uninitialized": ["initialized", "disposed"],
    "initialized": ["active", "disposed"],
    "active": ["disposed"],
    "disposed": [],
}

# Statuses in which actions may run (the initializer itself runs in "initialized").
MUTABLE_STATUSES = frozenset({ModuleStatus.INITIALIZED, ModuleStatus.ACTIVE})


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = MODULE_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed
