"""StoreRegistry — composes store modules into one application context.

The registry is the object bootstrap creates once and passes down: it owns
the persistence layer, the plugin manager, and one memoized instance per
module. ``initialize()`` brings every module to Active in a fixed order
(app, auth, ui) and is one-shot: repeated calls return the same registry
without re-running any initializer.

INVARIANT: A failed initializer aborts the whole sequence. A partially
initialized registry is never handed back as usable.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, cast

from appstate.config.models import AppConfig
from appstate.domain.errors import StoreInitializationError, StoreStateError
from appstate.domain.lifecycle import ModuleStatus
from appstate.store.modules import DEFAULT_MODULES, AppStore, AuthStore, UiStore

if TYPE_CHECKING:
    from types import TracebackType

    from appstate.plugins.manager import PluginManager
    from appstate.store.base import StoreModule
    from appstate.store.persistence import PersistenceLayer

logger = logging.getLogger(__name__)


class StoreRegistry:
    """Application context holding every store module.

    Parameters:
        persistence: Write-through layer shared by all modules.
        config: ``[app]`` settings section (the app module reads the version).
        plugins: Optional plugin manager for lifecycle hooks.
        modules: Module classes in initialization order.
    """

    def __init__(
        self,
        persistence: PersistenceLayer,
        *,
        config: AppConfig | None = None,
        plugins: PluginManager | None = None,
        modules: Sequence[type[StoreModule[Any]]] = DEFAULT_MODULES,
    ) -> None:
        self._persistence = persistence
        self._config = config or AppConfig()
        self._plugins = plugins
        self._classes: dict[str, type[StoreModule[Any]]] = {}
        for module_cls in modules:
            if module_cls.name in self._classes:
                msg = f"Duplicate store module name: {module_cls.name!r}"
                raise ValueError(msg)
            self._classes[module_cls.name] = module_cls
        self._instances: dict[str, StoreModule[Any]] = {}
        self._lock = threading.RLock()
        self._initialized = False
        self._failure: BaseException | None = None
        self._disposed = False

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    @property
    def persistence(self) -> PersistenceLayer:
        return self._persistence

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def plugins(self) -> PluginManager | None:
        return self._plugins

    @property
    def module_names(self) -> list[str]:
        """Registered module names, in initialization order."""
        return list(self._classes)

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # ------------------------------------------------------------------
    # Module access
    # ------------------------------------------------------------------

    def use(self, name: str) -> StoreModule[Any]:
        """Return the module *name*, constructing it on first use."""
        with self._lock:
            if self._disposed:
                msg = f"Cannot use store module {name!r}: registry is disposed"
                raise StoreStateError(msg)
            instance = self._instances.get(name)
            if instance is None:
                module_cls = self._classes.get(name)
                if module_cls is None:
                    msg = f"Unknown store module: {name!r}. Expected one of {self.module_names}"
                    raise KeyError(msg)
                instance = module_cls(self)
                self._instances[name] = instance
            return instance

    @property
    def app(self) -> AppStore:
        return cast("AppStore", self.use("app"))

    @property
    def auth(self) -> AuthStore:
        return cast("AuthStore", self.use("auth"))

    @property
    def ui(self) -> UiStore:
        return cast("UiStore", self.use("ui"))

    def require_active(self, name: str) -> StoreModule[Any]:
        """Return module *name* if it is Active, else raise.

        Initializers call this to assert an earlier module already ran.
        """
        instance = self._instances.get(name)
        if instance is None or instance.status is not ModuleStatus.ACTIVE:
            msg = f"Store module {name!r} is not active"
            raise StoreInitializationError(msg)
        return instance

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> StoreRegistry:
        """Bring every module to Active, in order. Idempotent.

        Raises:
            StoreInitializationError: If any module fails to construct or
                initialize; the remaining modules are left untouched and
                the registry refuses later attempts.
        """
        with self._lock:
            if self._initialized:
                return self
            if self._disposed:
                msg = "Cannot initialize a disposed store registry"
                raise StoreStateError(msg)
            if self._failure is not None:
                msg = "Store registry initialization previously failed"
                raise StoreInitializationError(msg) from self._failure

            for name in self._classes:
                try:
                    self.use(name).initialize()
                except Exception as exc:
                    self._failure = exc
                    logger.error("Store module %s failed to initialize", name, exc_info=True)
                    msg = f"Store module {name!r} failed to initialize: {exc}"
                    raise StoreInitializationError(msg) from exc

            self._initialized = True
            logger.debug("Store registry initialized: %s", ", ".join(self._classes))
        return self

    def dispose(self) -> None:
        """End the session: dispose modules (reverse order), then close storage."""
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            for instance in reversed(list(self._instances.values())):
                instance.dispose()
            self._persistence.close()
            logger.debug("Store registry disposed")

    def __enter__(self) -> StoreRegistry:
        return self.initialize()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.dispose()

    # ------------------------------------------------------------------
    # Introspection and maintenance
    # ------------------------------------------------------------------

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """JSON-ready ``{module: {"status", "state"}}`` for every module."""
        return {name: self.use(name).snapshot() for name in self._classes}

    def reset(self, name: str | None = None) -> None:
        """Forget persisted values of module *name* (or all modules).

        Live module state is untouched; the next session starts fresh.
        """
        if name is not None and name not in self._classes:
            msg = f"Unknown store module: {name!r}. Expected one of {self.module_names}"
            raise KeyError(msg)
        self._persistence.clear(name)
