"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors, tables)
or machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from onionctl.output.console import create_console, get_output, style_for_ring

if TYPE_CHECKING:
    from rich.console import Console

    from onionctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    no_color: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=settings.no_color)
    if result.ok:
        _render_ok(console, result, quiet=settings.quiet)
    else:
        _render_error(console, result)
    return get_output(console).rstrip("\n")


def _render_ok(console: Console, result: ServiceResult, *, quiet: bool) -> None:
    console.print(Text.assemble(("OK", "onion.ok"), ": ", (result.op, "onion.op")))
    if quiet:
        return
    for key, value in result.data.items():
        if key == "nodes" and isinstance(value, list):
            console.print(_nodes_table(value))
        elif key == "errors" and isinstance(value, list):
            for message in value:
                console.print(Text.assemble("  - ", (str(message), "onion.error")))
        elif isinstance(value, (dict, list)):
            console.print(
                Text.assemble(
                    (f"  {key}: ", "onion.key"), _json.dumps(value, separators=(",", ":"))
                )
            )
        else:
            console.print(Text.assemble((f"  {key}: ", "onion.key"), str(value)))


def _render_error(console: Console, result: ServiceResult) -> None:
    message = result.error.message if result.error else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "onion.error"), ": ", (result.op, "onion.op"), f" - {message}")
    )
    errors: list[Any] = result.error.detail.get("errors", []) if result.error else []
    for error in errors:
        console.print(Text(f"  - {error}"))


def _nodes_table(nodes: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Ring")
    table.add_column("Name")
    table.add_column("Targets")
    for node in nodes:
        ring = str(node.get("ring", ""))
        table.add_row(
            Text(ring, style=style_for_ring(ring)),
            str(node.get("name", "")),
            ", ".join(node.get("targets", [])),
        )
    return table
