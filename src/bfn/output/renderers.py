"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer. User-supplied
text is always wrapped in :class:`rich.text.Text` so that square brackets
in the input are never read as Rich markup.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from bfn.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from bfn.services.result import ServiceResult

ABSENT = "null"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render bare values only, one per line, for ``--quiet`` piping.

    Absent values render as empty lines so output lines stay aligned
    with input values.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "items" in data:
        return "\n".join(_quiet_value(_item_value(item)) for item in data["items"])
    if "dates" in data:
        return "\n".join(data["dates"])
    for key in ("value", "timestamp", "matches", "last_day"):
        if key in data:
            return _quiet_value(data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _quiet_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _item_value(item: dict[str, Any]) -> Any:
    if "code" in item:
        return item["code"]
    return item.get("id")


def _display(value: Any) -> Text:
    if value is None:
        return Text(ABSENT, style="bfn.absent")
    if isinstance(value, (dict, list)):
        return Text(_json.dumps(value, ensure_ascii=False, separators=(",", ":")))
    return Text(str(value), style="bfn.value")


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="bfn.ok"), Text(f"  {result.op}", style="bfn.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="bfn.key"), _display(value), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(Text(f"    {key}: {value}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    line = Text(" " * indent)
    line.append(f"{duration:>8.3f}ms", style="yellow" if duration > 100 else "dim")
    line.append(f"  {span.get('name', '?')}")
    if span.get("ok") is False:
        line.append("  failed", style="bfn.error")
    for key, value in span.get("annotations", {}).items():
        line.append(f"  {key}={value}", style="dim")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="bfn.warning"), Text(warning), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="bfn.error"),
        Text(f"  {result.op}", style="bfn.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {value}"))
    if verbose:
        _render_meta(console, result)


# ── Operation renderers ───────────────────────────────────────────────


def _render_new_uuid(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="bfn.id", no_wrap=True)
    table.add_column("Timestamp")
    for item in result.data.get("items", []):
        table.add_row(Text(item["id"]), _display(item.get("timestamp")))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_codes(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "family", data.get("family"))
    _field(console, "matched", f"{data.get('matched', 0)}/{data.get('total', 0)}")
    _render_warnings(console, result)
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Input")
    table.add_column("Code", style="bfn.id", no_wrap=True)
    for item in data.get("items", []):
        table.add_row(Text(repr(item["input"])), _display(item.get("code")))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_date_range(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    dates = result.data.get("dates", [])
    _field(console, "count", len(dates))
    if dates:
        _field(console, "first", dates[0])
        _field(console, "last", dates[-1])
    if verbose:
        for day in dates:
            console.print(Text(f"    {day}"))
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "new_uuid": _render_new_uuid,
    "parse_env_code": _render_codes,
    "date_range": _render_date_range,
}
