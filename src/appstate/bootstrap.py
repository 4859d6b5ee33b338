"""Bootstrap — build storage, plugins, and the store registry from settings.

``initialize_stores`` is the single composition call an application makes,
once, before anything reads store state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from appstate.infrastructure.database.engine import init_database
from appstate.infrastructure.storage import MemoryStorage, SqlStateStorage
from appstate.plugins.builtins.theme import RootClassPlugin
from appstate.plugins.manager import PluginManager
from appstate.store.persistence import PersistenceLayer
from appstate.store.registry import StoreRegistry

if TYPE_CHECKING:
    from appstate.config.settings import AppSettings
    from appstate.infrastructure.storage import StateStorage

logger = logging.getLogger(__name__)


def create_storage(settings: AppSettings) -> StateStorage:
    """Storage backend selected by ``[storage] backend``."""
    if settings.storage.backend == "memory":
        return MemoryStorage()
    return SqlStateStorage(init_database(settings.db_path))


def create_plugin_manager(*, discover: bool = True) -> PluginManager:
    """Plugin manager with built-ins registered and entry points loaded."""
    pm = PluginManager()
    pm.register_plugin(RootClassPlugin(), name="root-class")
    if discover:
        pm.discover_and_load()
    return pm


def initialize_stores(
    settings: AppSettings,
    *,
    storage: StateStorage | None = None,
    plugins: PluginManager | None = None,
) -> StoreRegistry:
    """Create the registry and bring every module to Active.

    On failure the registry is disposed and the error re-raised; callers
    never receive a partially initialized store. A given *storage* belongs
    to the registry from here on and is closed with it.
    """
    persistence = PersistenceLayer(
        storage if storage is not None else create_storage(settings),
        sync=settings.sync,
    )
    registry = StoreRegistry(persistence, config=settings.app, plugins=plugins)
    try:
        registry.initialize()
    except Exception:
        logger.error("[Store] Initialization failed")
        try:
            registry.dispose()
        except Exception:
            logger.warning("[Store] Dispose after failed initialization also failed", exc_info=True)
        raise
    return registry
