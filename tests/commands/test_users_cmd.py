"""Tests for the users command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from relayctl.cli import cli


@pytest.mark.usefixtures("_isolated_workspace")
class TestUsersCommands:
    def test_add_and_list(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["users", "add", "42", "--name", "Ada"]).exit_code == 0
        assert cli_runner.invoke(cli, ["users", "connect", "42", "7"]).exit_code == 0
        result = cli_runner.invoke(cli, ["--json", "users", "list"])
        assert result.exit_code == 0
        items = json.loads(result.stdout)["data"]["items"]
        assert [(i["id"], i["name"], i["connections"]) for i in items] == [("42", "Ada", ["7"])]

    def test_list_human(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["users", "add", "42", "--name", "Ada"])
        result = cli_runner.invoke(cli, ["users", "list"])
        assert result.exit_code == 0
        assert "Ada" in result.output

    def test_list_quiet_prints_ids(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["users", "add", "2"])
        cli_runner.invoke(cli, ["users", "add", "1"])
        result = cli_runner.invoke(cli, ["-q", "users", "list"])
        assert result.stdout.split() == ["1", "2"]

    def test_duplicate_add_fails(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["users", "add", "42"])
        result = cli_runner.invoke(cli, ["users", "add", "42"])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_show(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["users", "add", "42"])
        result = cli_runner.invoke(cli, ["--json", "users", "show", "42"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["id"] == "42"

    def test_show_lists_channels(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["users", "add", "42"])
        cli_runner.invoke(cli, ["users", "connect", "42", "7"])
        result = cli_runner.invoke(cli, ["users", "show", "42"])
        assert result.exit_code == 0
        assert "private-user-42" in result.stdout
        assert "private-connection-7" in result.stdout

    def test_connect_rejects_superscript_digit(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["users", "add", "42"])
        result = cli_runner.invoke(cli, ["users", "connect", "42", "\u00b2"])
        assert result.exit_code == 1
        assert "must be numeric" in result.output

    def test_disconnect(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["users", "add", "42"])
        cli_runner.invoke(cli, ["users", "connect", "42", "7"])
        assert cli_runner.invoke(cli, ["users", "disconnect", "42", "7"]).exit_code == 0
        assert cli_runner.invoke(cli, ["users", "disconnect", "42", "7"]).exit_code == 1

    def test_connect_twice_warns_on_stderr(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["users", "add", "42"])
        cli_runner.invoke(cli, ["users", "connect", "42", "7"])
        result = cli_runner.invoke(cli, ["users", "connect", "42", "7"])
        assert result.exit_code == 0
        assert "WARNING: 42 already has connection 7" in result.output

    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["users", "--examples"])
        assert result.exit_code == 0
        assert "relayctl users add 42" in result.output
