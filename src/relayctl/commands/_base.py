"""click command classes shared by every relayctl command.

Each command and group built on these accepts ``--examples``, which prints
the shell lines passed as ``examples=(...)`` and exits without running the
command body.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


class _ExamplesMixin:
    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._print_examples,
                help="Show usage examples.",
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        if not self.examples:
            click.echo(f"No examples for '{ctx.command_path}'.")
        else:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            for line in self.examples:
                click.echo(f"  $ {line}")
        ctx.exit(0)


class RelayCommand(_ExamplesMixin, click.Command):
    pass


class RelayGroup(_ExamplesMixin, click.Group):
    """Group whose ``@group.command()`` subcommands are :class:`RelayCommand`."""

    command_class = RelayCommand
