"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. It is the application bootstrap: the store registry
is built lazily on first use (so ``--help`` never touches storage) and
disposed when the root context closes. It is also the presentation error
boundary: ``Result.fail`` renders as a message with exit code 1, any
unexpected exception is logged and rendered generically with exit code 2.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import anyio
import click

from appstate.output.formatters import format_result

if TYPE_CHECKING:
    from appstate.config.settings import AppSettings
    from appstate.domain.result import Result
    from appstate.domain.usecase import UseCase
    from appstate.plugins.manager import PluginManager
    from appstate.store.registry import StoreRegistry

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: AppSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._registry: StoreRegistry | None = None

        from appstate.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            level=settings.app.log_level,
        )

    @property
    def plugins(self) -> PluginManager:
        """Plugin manager (built-ins plus entry points), created lazily."""
        if self._plugins is None:
            from appstate.bootstrap import create_plugin_manager

            self._plugins = create_plugin_manager()
        return self._plugins

    @property
    def registry(self) -> StoreRegistry:
        """The initialized store registry (created lazily on first access)."""
        if self._registry is None:
            from appstate.bootstrap import initialize_stores

            self._registry = initialize_stores(self.settings, plugins=self.plugins)
        return self._registry

    def close(self) -> None:
        """Dispose the registry, flushing pending persisted writes."""
        if self._registry is not None:
            registry, self._registry = self._registry, None
            with self.boundary("close"):
                registry.dispose()

    @contextmanager
    def boundary(self, op: str) -> Iterator[None]:
        """Render unexpected failures inside the block as a generic error."""
        try:
            yield
        except click.ClickException:
            raise
        except Exception:
            logger.error("Unexpected failure in %s", op, exc_info=True)
            click.echo(f"ERROR: {op} - unexpected failure (run with -v for details)", err=True)
            raise SystemExit(2) from None

    def execute(
        self,
        op: str,
        build: Callable[[StoreRegistry], UseCase[Any, Any]],
        request: Any = None,
    ) -> None:
        """Build a use-case against the registry, run it, and emit its Result."""
        with self.boundary(op):
            use_case = build(self.registry)
            result = anyio.run(use_case.execute, request)
            self.registry.persistence.flush()
        self.emit(result, op)

    def emit(self, result: Result[Any], op: str) -> None:
        """Output a Result with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, op, json_output=self.settings.json_output)
        if result.is_success:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
