"""Human-readable rendering of ServiceResults.

Each operation that needs more than ``key: value`` lines registers a
renderer for its ``op`` with :func:`_renders`. User-supplied strings (event
names, channels, error messages) are always wrapped in :class:`Text`, so
square brackets in them are printed rather than read as Rich markup.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from relayctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from relayctl.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console", bool], None]

_RENDERERS: dict[str, Renderer] = {}


def _renders(op: str) -> Callable[[Renderer], Renderer]:
    def register(fn: Renderer) -> Renderer:
        _RENDERERS[op] = fn
        return fn

    return register


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    console = create_console()
    if not result.ok:
        _render_failure(result, console, verbose)
    else:
        _RENDERERS.get(result.op, _render_fields)(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line per item, or a one-word status, for ``-q``."""
    if not result.ok:
        message = result.error.message if result.error else "failed"
        return f"ERROR: {result.op} — {message}"
    data = result.data
    if result.op == "authorize":
        return "granted" if data.get("success") else "denied"
    if result.op == "list_events":
        return "\n".join(data.get("events", []))
    if result.op == "list_users":
        return "\n".join(str(item["id"]) for item in data.get("items", []))
    return f"OK: {result.op}"


def _value_text(key: str, value: Any) -> Text:
    if key == "id" or key.endswith("_id"):
        return Text(str(value), style="relay.id")
    if isinstance(value, (dict, list)):
        return Text(json.dumps(value, separators=(",", ":")))
    return Text(str(value))


def _line(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="relay.key"), _value_text(key, value), sep="")


def _header(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="relay.ok"), Text(f"  {result.op}", style="relay.op"))


def _render_failure(result: ServiceResult, console: Console, verbose: bool) -> None:
    error = result.error
    console.print(
        Text("ERROR", style="relay.error"),
        Text(f"  {result.op}", style="relay.op"),
        "—",
        Text(error.message if error else "failed"),
    )
    if verbose and error and error.detail:
        console.print(Text(f"  code: {error.code}", style="relay.muted"))
        for key, value in error.detail.items():
            _line(console, key, value)


def _render_fields(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    for key, value in result.data.items():
        _line(console, key, value)


@_renders("dispatch")
def _render_dispatch(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    _line(console, "event", result.data["event"])
    _line(console, "args", result.data["args"])
    if result.data["handled"]:
        console.print(Text("  handled", style="relay.granted"))
    else:
        console.print(Text("  no handler registered (ignored)", style="relay.muted"))


@_renders("authorize")
def _render_authorize(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    verdict = Text("GRANTED", style="relay.granted") if data["success"] else Text(
        "DENIED", style="relay.denied"
    )
    console.print(verdict, Text(data["channel"]))
    _line(console, "user_id", data["user_id"])
    if verbose:
        _line(console, "topic", data["topic"])
        _line(console, "id", data["id"])


@_renders("list_events")
def _render_events(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    names = result.data.get("events", [])
    for name in names:
        console.print(Text(f"  {name}"))
    if not names:
        console.print(Text("  no event handlers registered", style="relay.muted"))


@_renders("list_users")
def _render_users(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    items = result.data.get("items", [])
    if not items:
        console.print(Text("  no users", style="relay.muted"))
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("ID", style="relay.id")
    table.add_column("Name")
    table.add_column("Connections")
    if verbose:
        table.add_column("Created", style="relay.muted")
    for item in items:
        cells = [
            Text(str(item["id"])),
            Text(item.get("name") or ""),
            Text(", ".join(item["connections"])),
        ]
        if verbose:
            cells.append(Text(item["created"]))
        table.add_row(*cells)
    console.print(table)


@_renders("show_user")
def _render_user(result: ServiceResult, console: Console, verbose: bool) -> None:
    data = result.data
    _header(console, result)
    _line(console, "id", data["id"])
    if data.get("name"):
        _line(console, "name", data["name"])
    if verbose:
        _line(console, "created", data["created"])
    console.print(Text("  channels:", style="relay.key"))
    for channel in data.get("channels", []):
        console.print(Text(f"    {channel}"))
    if not data.get("channels"):
        console.print(Text("    none", style="relay.muted"))
