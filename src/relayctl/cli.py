"""Root CLI group for relayctl with global flags and command registration."""

from __future__ import annotations

import click

from relayctl import __version__
from relayctl.commands import register_commands
from relayctl.commands._base import RelayGroup
from relayctl.commands._context import AppContext
from relayctl.config.settings import RelaySettings


@click.group(
    cls=RelayGroup,
    invoke_without_command=True,
    examples=(
        "relayctl users add 42 && relayctl users connect 42 7",
        "relayctl authorize private-connection-7 --user 42",
        "relayctl -v dispatch UserConnected 42 7",
    ),
)
@click.version_option(version=__version__, prog_name="relayctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """relayctl — event dispatch and private channel authorization."""
    settings = RelaySettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
