"""Root CLI group for appstate with global flags and command registration."""

from __future__ import annotations

import click

from appstate import __version__
from appstate.commands import register_commands
from appstate.commands._context import AppContext
from appstate.config.settings import AppSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="appstate")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--sync", is_flag=True, help="Write persisted fields synchronously.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    sync: bool,
) -> None:
    """appstate — inspect and drive the persisted application store."""
    settings = AppSettings.load(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        sync=sync,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
