"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from zooctl.output.console import create_console, get_output, style_for_health

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from zooctl.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: ids for lists, the new id for creates, else OK/ERROR."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict))
    if "id" in result.data and result.op.startswith("create"):
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="zoo.ok"), Text(f"  {result.op}", style="zoo.op"))


def _creature_table(rows: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("ID", style="zoo.id", justify="right")
    table.add_column("Name", style="zoo.name")
    table.add_column("Species")
    table.add_column("Danger", justify="right")
    table.add_column("Health")
    table.add_column("Zone", justify="right")
    for row in rows:
        health = str(row.get("health_status", ""))
        zone_id = row.get("zone_id")
        table.add_row(
            str(row.get("id", "")),
            str(row.get("name", "")),
            str(row.get("species", "")),
            str(row.get("danger_level", "")),
            Text(health, style=style_for_health(health)),
            "" if zone_id is None else str(zone_id),
        )
    return table


def _zone_table(rows: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("ID", style="zoo.id", justify="right")
    table.add_column("Name", style="zoo.name")
    table.add_column("Occupancy", justify="right")
    table.add_column("Description")
    for row in rows:
        housed = row.get("creatures") or []
        table.add_row(
            str(row.get("id", "")),
            str(row.get("name", "")),
            f"{len(housed)}/{row.get('capacity', 0)}",
            str(row.get("description", "")),
        )
    return table


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        console.print(Text(f"  {key}: ", style="zoo.key"), Text(str(value)), sep="")


def _render_creature(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    console.print(_creature_table([result.data]))


def _render_creature_list(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        console.print("  No creatures.")
        return
    console.print(_creature_table(items))


def _render_zone(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    console.print(_zone_table([result.data]))
    housed = result.data.get("creatures") or []
    if housed:
        console.print(Text("  Creatures:", style="zoo.key"))
        console.print(_creature_table(housed))


def _render_zone_list(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        console.print("  No zones.")
        return
    console.print(_zone_table(items))


def _render_error(result: ServiceResult, console: Console) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    code = error.code if error else "ERROR"
    console.print(
        Text("ERROR", style="zoo.error"),
        Text(f"  {result.op}", style="zoo.op"),
        Text(f"  [{code}] {message}"),
    )
    if error is not None:
        for violation in error.detail.get("violations", []):
            console.print(f"  - {violation['field']}: {violation['message']}")


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "create_creature": _render_creature,
    "get_creature": _render_creature,
    "update_creature": _render_creature,
    "list_creatures": _render_creature_list,
    "create_zone": _render_zone,
    "get_zone": _render_zone,
    "update_zone": _render_zone,
    "list_zones": _render_zone_list,
}
