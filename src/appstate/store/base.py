"""StoreModule — an independent, action-mutated slice of application state.

Every module declares:
  * ``name`` — storage namespace and registry key,
  * ``state_model`` — a frozen pydantic model describing the slice,
  * ``persist`` — field names written through to durable storage.

INVARIANT: Actions are the only mutation path. ``state`` hands out detached
frozen snapshots, and every action funnels through :meth:`_commit`.
INVARIANT: Only fields named in ``persist`` reach storage; everything else
starts from its initial value in every session.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from appstate.domain.errors import StoreStateError
from appstate.domain.lifecycle import MUTABLE_STATUSES, ModuleStatus, is_valid_transition

if TYPE_CHECKING:
    from appstate.store.registry import StoreRegistry

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=BaseModel)


class StoreModule(Generic[S]):
    """Base for store slices.

    Subclasses set the class attributes, add action methods that call
    :meth:`_commit`, and may override :meth:`initial_state` and
    :meth:`_on_initialize`.
    """

    name: ClassVar[str]
    state_model: ClassVar[type[BaseModel]]
    persist: ClassVar[tuple[str, ...]] = ()

    def __init__(self, registry: StoreRegistry) -> None:
        unknown = set(self.persist) - set(self.state_model.model_fields)
        if unknown:
            msg = f"Module {self.name!r} persists unknown fields: {sorted(unknown)}"
            raise ValueError(msg)

        self._registry = registry
        self._lock = threading.RLock()
        self._status = ModuleStatus.UNINITIALIZED
        self._state: S = self._hydrate(self.initial_state())
        self._transition(ModuleStatus.INITIALIZED)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def status(self) -> ModuleStatus:
        return self._status

    @property
    def state(self) -> S:
        """Detached, frozen snapshot of the current state."""
        return self._state.model_copy(deep=True)

    def initial_state(self) -> S:
        """State of a fresh session, before persisted fields are applied."""
        return self.state_model()  # type: ignore[return-value]

    def initialize(self) -> None:
        """Run the module's startup logic once and mark it Active."""
        with self._lock:
            if self._status is ModuleStatus.ACTIVE:
                return
            if self._status is not ModuleStatus.INITIALIZED:
                msg = f"Cannot initialize {self.name} module while {self._status}"
                raise StoreStateError(msg)
            self._on_initialize()
            self._transition(ModuleStatus.ACTIVE)
        plugins = self._registry.plugins
        if plugins is not None:
            plugins.notify(
                "post_module_initialized",
                module_name=self.name,
                state=self._state.model_dump(mode="json"),
            )

    def dispose(self) -> None:
        """End the session for this module. Further actions raise."""
        with self._lock:
            if self._status is ModuleStatus.DISPOSED:
                return
            self._transition(ModuleStatus.DISPOSED)

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready ``{"status", "state"}`` view of the module."""
        return {"status": str(self._status), "state": self._state.model_dump(mode="json")}

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    def _on_initialize(self) -> None:
        """Startup logic. Runs exactly once, before the module is Active."""

    def _commit(self, **changes: Any) -> None:
        """Apply *changes* atomically, persist declared fields, notify plugins."""
        unknown = set(changes) - set(self.state_model.model_fields)
        if unknown:
            msg = f"{self.state_model.__name__} has no field(s) {sorted(unknown)}"
            raise AttributeError(msg)

        with self._lock:
            if self._status not in MUTABLE_STATUSES:
                msg = f"Cannot mutate {self.name} module while {self._status}"
                raise StoreStateError(msg)

            previous = self._state
            merged = previous.model_dump()
            merged.update({field: _detach(value) for field, value in changes.items()})
            self._state = self.state_model.model_validate(merged)  # type: ignore[assignment]

            persisted = [field for field in changes if field in self.persist]
            if persisted:
                self._registry.persistence.write(
                    self.name,
                    self._state.model_dump(mode="json", include=set(persisted)),
                )

            changed = [
                field for field in changes if getattr(previous, field) != getattr(self._state, field)
            ]

        plugins = self._registry.plugins
        if changed and plugins is not None:
            plugins.notify(
                "post_state_change",
                module_name=self.name,
                fields_changed=changed,
                state=self._state.model_dump(mode="json"),
            )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _hydrate(self, initial: S) -> S:
        """Overlay stored values of persisted fields onto *initial*."""
        if not self.persist:
            return initial
        stored = self._registry.persistence.read(self.name, self.persist)
        state = initial
        for field, raw in stored.items():
            try:
                state = self.state_model.model_validate({**state.model_dump(), field: raw})  # type: ignore[assignment]
            except ValidationError:
                logger.warning(
                    "Ignoring invalid persisted value for %s.%s",
                    self.name,
                    field,
                    exc_info=True,
                )
        if stored:
            logger.debug("Hydrated %s from storage: %s", self.name, ",".join(stored))
        return state

    def _transition(self, target: ModuleStatus) -> None:
        if not is_valid_transition(self._status, target):
            msg = f"Invalid {self.name} module transition: {self._status} -> {target}"
            raise StoreStateError(msg)
        logger.debug("Store module %s: %s -> %s", self.name, self._status, target)
        self._status = target


def _detach(value: Any) -> Any:
    """Plain copy of *value* so callers keep no handle into module state."""
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value
