"""AppContext: the object every relayctl command receives via ``@click.pass_obj``.

It owns the settings for the invocation, opens the workspace on demand and
turns a ServiceResult into output plus an exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from relayctl.config.logging import configure_logging
from relayctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from relayctl.config.settings import RelaySettings
    from relayctl.services.result import ServiceResult
    from relayctl.workspace import Workspace


class AppContext:
    """Per-invocation state.

    The workspace (database, plugins, registry) is only built when a command
    asks for it, so ``--help``, ``--version`` and ``--examples`` stay cheap.
    """

    def __init__(self, settings: RelaySettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._workspace: Workspace | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        if self._workspace is None:
            from relayctl.workspace import Workspace

            self._workspace = Workspace(self.settings)
        return self._workspace

    def close(self) -> None:
        if self._workspace is not None:
            self._workspace.close()
            self._workspace = None

    def emit(self, result: ServiceResult, *, exit_code: int = 0) -> None:
        """Print *result* and exit non-zero when the command should fail.

        Failed results go to stderr and always exit 1. Successful ones go to
        stdout, with warnings on stderr unless the output is JSON (where they
        are already in the payload); *exit_code* lets ``authorize`` exit 1 on
        a denial that is still ``ok``.
        """
        text = format_result(result, settings=self.output)
        click.echo(text, err=not result.ok)
        if result.ok and not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        code = exit_code if result.ok else 1
        if code:
            raise SystemExit(code)
