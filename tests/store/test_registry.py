"""Tests for StoreRegistry composition and the initialization sequence."""

from __future__ import annotations

from typing import ClassVar

import pytest
from pydantic import BaseModel, ConfigDict

from appstate.config.models import AppConfig
from appstate.domain.errors import StoreInitializationError, StoreStateError
from appstate.domain.lifecycle import ModuleStatus
from appstate.store.base import StoreModule
from appstate.store.modules import AppStore, AuthStore, UiStore
from appstate.store.registry import StoreRegistry
from tests.conftest import RegistryFactory


class _Empty(BaseModel):
    model_config = ConfigDict(frozen=True)


class _Recorder(StoreModule[_Empty]):
    """Appends its name to ``calls`` when initialized."""

    name = "recorder"
    state_model = _Empty
    calls: ClassVar[list[str]] = []

    def _on_initialize(self) -> None:
        self.calls.append(self.name)


class _Broken(StoreModule[_Empty]):
    name = "broken"
    state_model = _Empty

    def _on_initialize(self) -> None:
        msg = "cannot start"
        raise RuntimeError(msg)


@pytest.fixture(autouse=True)
def _reset_recorder() -> None:
    _Recorder.calls.clear()


class TestInitialize:
    def test_all_modules_active(self, registry: StoreRegistry) -> None:
        assert registry.is_initialized is True
        assert registry.module_names == ["app", "auth", "ui"]
        for name in registry.module_names:
            assert registry.use(name).status is ModuleStatus.ACTIVE

    def test_app_flag_set_by_initializer(self, registry: StoreRegistry) -> None:
        assert registry.app.state.is_initialized is True

    def test_idempotent(self, make_registry: RegistryFactory) -> None:
        registry = make_registry(modules=(AppStore, _Recorder))
        first = registry.initialize()
        second = registry.initialize()
        assert first is second is registry
        assert _Recorder.calls == ["recorder"]

    def test_runs_in_declared_order(self, make_registry: RegistryFactory) -> None:
        class _Second(_Recorder):
            name = "second"

        make_registry(modules=(_Recorder, _Second)).initialize()
        assert _Recorder.calls == ["recorder", "second"]

    def test_auth_requires_app_first(self, make_registry: RegistryFactory) -> None:
        registry = make_registry(modules=(AuthStore, AppStore))
        with pytest.raises(StoreInitializationError, match="'auth' failed"):
            registry.initialize()

    def test_config_version_reaches_app_module(self, make_registry: RegistryFactory) -> None:
        registry = make_registry(config=AppConfig(version="4.2.0")).initialize()
        assert registry.app.state.version == "4.2.0"

    def test_context_manager(self, make_registry: RegistryFactory) -> None:
        with make_registry() as registry:
            assert registry.is_initialized
        assert registry.is_disposed


class TestInitializeFailure:
    def test_failure_aborts_remaining_modules(self, make_registry: RegistryFactory) -> None:
        registry = make_registry(modules=(AppStore, _Broken, _Recorder))
        with pytest.raises(StoreInitializationError, match="'broken' failed to initialize: cannot start"):
            registry.initialize()
        assert _Recorder.calls == []
        assert registry.is_initialized is False

    def test_cause_is_chained(self, make_registry: RegistryFactory) -> None:
        registry = make_registry(modules=(_Broken,))
        with pytest.raises(StoreInitializationError) as exc_info:
            registry.initialize()
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_no_retry_after_failure(self, make_registry: RegistryFactory) -> None:
        registry = make_registry(modules=(_Broken, _Recorder))
        with pytest.raises(StoreInitializationError):
            registry.initialize()
        with pytest.raises(StoreInitializationError, match="previously failed"):
            registry.initialize()
        assert _Recorder.calls == []


class TestModuleAccess:
    def test_use_is_memoized(self, registry: StoreRegistry) -> None:
        assert registry.use("ui") is registry.use("ui")
        assert registry.ui is registry.use("ui")

    def test_typed_accessors(self, registry: StoreRegistry) -> None:
        assert isinstance(registry.app, AppStore)
        assert isinstance(registry.auth, AuthStore)
        assert isinstance(registry.ui, UiStore)

    def test_unknown_module(self, registry: StoreRegistry) -> None:
        with pytest.raises(KeyError, match="Unknown store module"):
            registry.use("cart")

    def test_duplicate_names_rejected(self, make_registry: RegistryFactory) -> None:
        with pytest.raises(ValueError, match="Duplicate store module name"):
            make_registry(modules=(AppStore, AppStore))

    def test_require_active(self, make_registry: RegistryFactory) -> None:
        registry = make_registry()
        with pytest.raises(StoreInitializationError, match="'app' is not active"):
            registry.require_active("app")
        registry.initialize()
        assert registry.require_active("app") is registry.app


class TestDispose:
    def test_disposes_modules_and_persistence(self, make_registry: RegistryFactory) -> None:
        registry = make_registry().initialize()
        ui = registry.ui
        registry.dispose()
        assert registry.is_disposed
        assert ui.status is ModuleStatus.DISPOSED
        assert registry.persistence.closed

    def test_use_after_dispose(self, registry: StoreRegistry) -> None:
        registry.dispose()
        with pytest.raises(StoreStateError, match="disposed"):
            registry.use("ui")

    def test_initialize_after_dispose(self, make_registry: RegistryFactory) -> None:
        registry = make_registry()
        registry.dispose()
        with pytest.raises(StoreStateError, match="disposed"):
            registry.initialize()

    def test_dispose_is_idempotent(self, registry: StoreRegistry) -> None:
        registry.dispose()
        registry.dispose()


class TestSnapshotAndReset:
    def test_snapshot_shape(self, registry: StoreRegistry) -> None:
        snapshot = registry.snapshot()
        assert list(snapshot) == ["app", "auth", "ui"]
        assert snapshot["app"] == {
            "status": "active",
            "state": {"is_initialized": True, "version": "1.0.0"},
        }
        assert snapshot["ui"]["state"] == {"theme": "light", "sidebar_collapsed": False, "loading": False}
        assert snapshot["auth"]["state"]["user"] is None

    def test_reset_one_module(self, registry: StoreRegistry, make_registry: RegistryFactory) -> None:
        registry.ui.toggle_theme()
        registry.auth.set_token("abc")
        registry.reset("ui")
        # Live state is untouched.
        assert registry.ui.state.theme == "dark"

        registry.dispose()
        fresh = make_registry().initialize()
        assert fresh.ui.state.theme == "light"
        assert fresh.auth.state.token == "abc"

    def test_reset_all(self, registry: StoreRegistry, make_registry: RegistryFactory) -> None:
        registry.ui.toggle_sidebar()
        registry.auth.set_token("abc")
        registry.reset()
        registry.dispose()
        fresh = make_registry().initialize()
        assert fresh.ui.state.sidebar_collapsed is False
        assert fresh.auth.state.token is None

    def test_reset_unknown_module(self, registry: StoreRegistry) -> None:
        with pytest.raises(KeyError):
            registry.reset("cart")
