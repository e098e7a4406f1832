"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from popmelt.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from popmelt.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to text via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="pm.key")
    style = "pm.id" if key == "id" or key.endswith("_id") else ""
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(k, Text(str(value), style=style), end="")
    console.print()


def _render_source(console: Console, result: ServiceResult) -> None:
    if result.meta and "source" in result.meta:
        console.print(Text(f"  source: {result.meta['source']}", style="pm.key"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="pm.error"), Text(f"  {result.op}", style="pm.op"), " - ", msg)
    if verbose and err and err.detail:
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_talent_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="pm.id", no_wrap=True)
    table.add_column("Name", style="pm.name")
    table.add_column("Type")
    if verbose:
        table.add_column("Keywords", style="dim")
    for item in items:
        row = [str(item.get("id", "")), str(item.get("name", "")), str(item.get("type", ""))]
        if verbose:
            keywords = (item.get("aesthetic") or {}).get("keywords", [])
            row.append(", ".join(keywords))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} talents")
    if verbose:
        _render_source(console, result)


def _render_talent(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    aesthetic = d.get("aesthetic") or {}
    lines = [f"type: {d.get('type', '')}"]
    for key in ("title", "summary", "description"):
        if d.get(key):
            lines.append(f"{key}: {d[key]}")
    if aesthetic.get("keywords"):
        lines.append(f"keywords: {', '.join(aesthetic['keywords'])}")
    content = "\n".join(lines)
    if aesthetic.get("description"):
        content += f"\n\n{aesthetic['description']}"
    title = f"{d.get('id', '?')} - {d.get('name', '')}"
    console.print(Panel(content, title=title, border_style="dim", expand=False))
    if verbose:
        _render_source(console, result)


def _render_css(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(result.data.get("css", ""), markup=False, emoji=False, soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="pm.ok"), Text(f"  {result.op}", style="pm.op"))
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_source(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_talents": _render_talent_table,
    "query_talents": _render_talent_table,
    "get_talent": _render_talent,
    "generate_css": _render_css,
}
