"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tzc.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from tzc.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, color: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(color=color)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render bare values for ``--quiet`` mode, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR {result.op}: {msg}"

    d = result.data
    if result.op == "convert":
        return str(d.get("formatted", ""))
    if result.op == "convert_defaults":
        return "\n".join(z["formatted"] for z in d.get("zones", []) if "formatted" in z)
    if result.op == "list_zones":
        return "\n".join(d.get("zones", []))
    return f"OK: {result.op}"


def render_lead(result: ServiceResult) -> str | None:
    """Return the line announcing a multi-zone result, if it has one."""
    if not result.ok or result.op != "convert_defaults":
        return None
    timestamp = result.data.get("timestamp")
    if timestamp is None:
        return "No timestamp provided. Displaying current time in default zones:"
    return f"Converting {timestamp} to default timezones:"


def render_zone_listing(zones: Sequence[str], *, columns: int = 3, color: bool = False) -> str:
    """Render a numbered grid of zone names, filled row by row."""
    console = create_console(color=color)
    console.print(_zone_grid(zones, columns=columns))
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _zone_grid(zones: Sequence[str], *, columns: int) -> Table:
    columns = max(1, columns)
    grid = Table.grid(padding=(0, 2))
    for _ in range(columns):
        grid.add_column(no_wrap=True)
    cells = [Text.assemble((f"{i:>3}) ", "tzc.label"), zone) for i, zone in enumerate(zones, 1)]
    for start in range(0, len(cells), columns):
        row = cells[start : start + columns]
        row.extend(Text("") for _ in range(columns - len(row)))
        grid.add_row(*row)
    return grid


def _zone_line(console: Console, label: str, zone: str, formatted: str) -> None:
    line = Text.assemble(
        (f"  {label:<8} ", "tzc.label"),
        (f"{zone:<22} ", "tzc.zone"),
        (formatted, "tzc.time"),
    )
    console.print(line)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tzc.error")
    console.print(label, Text(f" {result.op}: {msg}"), sep="")

    if err and err.detail.get("tip"):
        console.print(Text(f"Tip: {err.detail['tip']}", style="tzc.tip"))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        console.print(Text(f"    code: {err.code}"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Conversion renderers ──────────────────────────────────────────────


def _render_convert(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single-zone conversion with the alias note, if any."""
    d = result.data
    console.print(
        Text("Converting "),
        Text(str(d.get("timestamp", "")), style="tzc.timestamp"),
        Text(" to "),
        Text(str(d.get("requested", "")), style="tzc.zone"),
        Text(":"),
        sep="",
    )
    console.print(
        Text(f" {d.get('zone', '')}", style="tzc.zone"),
        Text(": "),
        Text(str(d.get("formatted", "")), style="tzc.time"),
        sep="",
    )
    note = d.get("note")
    if note:
        console.print(Text(f"(Note: {note})", style="tzc.note"))


def _render_defaults(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the UTC header followed by one line per default zone."""
    d = result.data
    console.print(Text(f"Time based on UTC: {d.get('utc', '')}", style="tzc.header"))
    for item in d.get("zones", []):
        label = str(item.get("label", ""))
        zone = str(item.get("zone", ""))
        if "formatted" in item:
            _zone_line(console, label, zone, str(item["formatted"]))
        else:
            line = Text.assemble(
                (f"  {label:<8} ", "tzc.label"),
                (f"{zone:<22} ", "tzc.zone"),
                ("error: ", "tzc.error"),
                str(item.get("error", "")),
            )
            console.print(line)


def _render_list_zones(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    zones = result.data.get("zones", [])
    console.print(_zone_grid(zones, columns=3))
    console.print(f"\n{result.data.get('count', len(zones))} zones")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line plus key-value fields."""
    console.print(Text("OK", style="tzc.ok"), Text(f"  {result.op}"), sep="")
    for key, value in result.data.items():
        console.print(Text(f"  {key}: ", style="tzc.label"), Text(str(value)), sep="")


_OP_RENDERERS: dict[str, Any] = {
    "convert": _render_convert,
    "convert_defaults": _render_defaults,
    "list_zones": _render_list_zones,
}
