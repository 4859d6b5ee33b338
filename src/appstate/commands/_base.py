"""Click base classes carrying an ``--examples`` flag.

``appstate ui --examples`` prints the usage examples declared on the
command and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds the ``examples`` keyword and the eager flag that prints it."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


def _examples_option(examples: str) -> click.Option:
    def _show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show,
        help="Show usage examples.",
    )


class AppCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=``."""


class AppGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples=``; its subcommands default to :class:`AppCommand`."""

    command_class = AppCommand
