"""Store layer — persisted, modular application state.

Store modules may import from domain, config models, and infrastructure
protocols. They must never import from usecases, commands, or output.
"""

from appstate.store.base import StoreModule
from appstate.store.persistence import PersistenceLayer
from appstate.store.registry import StoreRegistry

__all__ = ["PersistenceLayer", "StoreModule", "StoreRegistry"]
