"""Shared pytest fixtures and test helpers for appstate tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from appstate.config.models import AppConfig
from appstate.infrastructure.database.engine import init_database
from appstate.infrastructure.storage import MemoryStorage
from appstate.plugins.manager import PluginManager
from appstate.store.modules import DEFAULT_MODULES
from appstate.store.persistence import PersistenceLayer
from appstate.store.registry import StoreRegistry

RegistryFactory = Callable[..., StoreRegistry]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / ".appstate" / "state.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def storage() -> MemoryStorage:
    """In-memory storage shared across simulated restarts within a test."""
    return MemoryStorage()


@pytest.fixture
def make_registry(storage: MemoryStorage) -> Iterator[RegistryFactory]:
    """Factory for registries over the shared *storage*; disposes them all afterwards.

    Each call simulates a fresh session (process restart) over the same storage.
    """
    created: list[StoreRegistry] = []

    def _make(
        *,
        config: AppConfig | None = None,
        plugins: PluginManager | None = None,
        modules: Sequence[type[Any]] = DEFAULT_MODULES,
        sync: bool = True,
        backing: Any = None,
    ) -> StoreRegistry:
        persistence = PersistenceLayer(backing if backing is not None else storage, sync=sync)
        registry = StoreRegistry(persistence, config=config, plugins=plugins, modules=modules)
        created.append(registry)
        return registry

    yield _make

    for registry in created:
        registry.dispose()


@pytest.fixture
def registry(make_registry: RegistryFactory) -> StoreRegistry:
    """Initialized registry over in-memory storage."""
    return make_registry().initialize()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI keeps its state there.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test classes.
    """
    monkeypatch.delenv("APPSTATE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def restart(registry: StoreRegistry, make_registry: RegistryFactory, **kwargs: Any) -> StoreRegistry:
    """End *registry*'s session and start a new, initialized one over the same storage."""
    registry.dispose()
    return make_registry(**kwargs).initialize()
