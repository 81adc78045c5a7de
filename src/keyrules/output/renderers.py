"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from keyrules.output.console import create_console, get_output, style_for_presence

if TYPE_CHECKING:
    from rich.console import Console

    from keyrules.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if result.ok:
        return f"OK: {result.op}"
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {msg}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="kr.ok"), Text(f"  {result.op}", style="kr.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text.assemble((f"  {key}: ", "kr.field"), str(value)))


def _render_key_errors(console: Console, errors: dict[str, list[str]]) -> None:
    """Print each failing key followed by its message-keys."""
    for key, messages in errors.items():
        console.print(Text(f"  {key}", style="kr.key"))
        for message in messages:
            console.print(Text.assemble("    - ", (message, "kr.message")))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="kr.error"),
        Text(f"  {result.op}", style="kr.op"),
        Text(" - "),
        Text(msg),
    )
    if err is None or not err.detail:
        return

    errors = err.detail.get("errors")
    if isinstance(errors, dict):
        _render_key_errors(console, errors)

    if verbose:
        extra = {k: v for k, v in err.detail.items() if k != "errors" and v is not None}
        for k, v in extra.items():
            _field(console, k, v)


def _render_schema(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "path", result.data.get("path", ""))
    _field(console, "rules", result.data.get("count", 0))

    rules = result.data.get("rules", [])
    if not rules:
        return
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Key")
    table.add_column("Presence")
    table.add_column("Macro")
    table.add_column("Predicate")
    for rule in rules:
        presence = rule.get("presence", "")
        table.add_row(
            Text(rule.get("key", "")),
            Text(presence, style=style_for_presence(presence)),
            Text(rule.get("macro", "")),
            Text(rule.get("predicate", "")),
        )
    console.print()
    console.print(table)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    output = result.data.get("output", {})
    _field(console, "keys", len(output))
    if verbose:
        for key, value in output.items():
            _field(console, key, repr(value))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "check_schema": _render_schema,
    "validate": _render_validate,
}
