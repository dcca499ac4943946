"""Tests for the --examples flag every relayctl command carries."""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from relayctl.cli import cli
from relayctl.commands._base import RelayCommand, RelayGroup

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    ([], ["relayctl authorize private-connection-7 --user 42"]),
    (["dispatch"], ["$ relayctl dispatch GenericEvent 10", "'{\"kind\": \"ping\"}'"]),
    (["events"], ["relayctl -q events"]),
    (["authorize"], ["|| echo denied"]),
    (["users"], ["relayctl users add 42 --name Ada"]),
    (["users", "add"], ["relayctl users add 42"]),
    (["users", "list"], ["relayctl --json users list"]),
    (["users", "show"], ["relayctl users show 42"]),
    (["users", "connect"], ["relayctl users connect 42 7"]),
    (["users", "disconnect"], ["relayctl users disconnect 42 7"]),
]


@pytest.mark.usefixtures("_isolated_workspace")
@pytest.mark.parametrize(
    "args,expected",
    EXAMPLES_COMMANDS,
    ids=["_".join(args) or "root" for args, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], expected: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0
    assert "Examples for '" in result.output
    for keyword in expected:
        assert keyword in result.output


@pytest.mark.usefixtures("_isolated_workspace")
def test_examples_skip_command_body(cli_runner: CliRunner) -> None:
    """authorize requires --user; --examples short-circuits before that check."""
    result = cli_runner.invoke(cli, ["authorize", "--examples"])
    assert result.exit_code == 0
    assert "Missing option" not in result.output


@pytest.mark.usefixtures("_isolated_workspace")
class TestRelayCommandClasses:
    def test_command_without_examples(self, cli_runner: CliRunner) -> None:
        @click.command(cls=RelayCommand)
        def bare() -> None:
            click.echo("ran")

        result = cli_runner.invoke(bare, ["--examples"])
        assert result.exit_code == 0
        assert "No examples for 'bare'." in result.output
        assert "ran" not in result.output

    def test_group_subcommands_use_relay_command(self) -> None:
        @click.group(cls=RelayGroup)
        def grp() -> None:
            pass

        @grp.command(examples=("grp sub",))
        def sub() -> None:
            pass

        assert isinstance(grp.commands["sub"], RelayCommand)
        assert grp.commands["sub"].examples == ("grp sub",)  # type: ignore[attr-defined]

    def test_examples_listed_in_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["dispatch", "--help"])
        assert "--examples" in result.output
