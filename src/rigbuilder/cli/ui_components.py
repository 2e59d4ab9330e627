"""Rich UI components for the CLI.

Commands stay focused on flow; tables and panels live here so several
commands can share them.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rigbuilder.core.domain.category import Category
from rigbuilder.core.services.query import QueryState, QueryStatus


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in JSON / non-interactive modes)."""

    title = Text("Desktop Builder", style="bold cyan")
    subtitle = Text("Build your perfect desktop computer", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _category_label(value: Any) -> str:
    if isinstance(value, str) and Category.is_valid(value):
        return Category(value).label()
    return "" if value is None else str(value)


def _specs_summary(specs: Any, limit: int = 3) -> str:
    if isinstance(specs, dict):
        parts = [f"{k}={v}" for k, v in list(specs.items())[:limit]]
        if len(specs) > limit:
            parts.append("…")
        return ", ".join(parts)
    if specs is None:
        return ""
    return json.dumps(specs, default=str) if not isinstance(specs, str) else specs


def build_components_table(components: Iterable[Any], *, title: str = "Components") -> Table:
    """Table of component records.

    Records without component fields (e.g. `{"error": ...}` bodies from the
    raw accessors) show up as a single row with the error column filled.
    """

    # Backend values are plain text, never Rich markup.
    table = Table(title=Text(title))
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Category", style="white")
    table.add_column("Brand", style="bright_green")
    table.add_column("Model", style="white")
    table.add_column("SKU", style="dim")
    table.add_column("Specs", style="magenta")
    table.add_column("Error", style="red")

    for item in components:
        if not isinstance(item, dict):
            table.add_row("", "", "", "", "", "", Text(str(item)))
            continue
        cells = (
            str(item.get("id", "")),
            _category_label(item.get("category")),
            str(item.get("brand") or ""),
            str(item.get("model") or ""),
            str(item.get("sku") or ""),
            _specs_summary(item.get("specs")),
            str(item.get("error") or ""),
        )
        table.add_row(*(Text(cell) for cell in cells))
    return table


def build_health_panel(state: QueryState[Any]) -> Panel | Text:
    """Render a health query in one of its three visible states."""

    if state.status in (QueryStatus.IDLE, QueryStatus.LOADING):
        return Text("Loading...", style="dim")

    if state.status is QueryStatus.ERROR:
        return Text(f"Error: {state.error_message}", style="bold red")

    message = getattr(state.data, "message", None) or "No message available"
    return Panel(Text(message), title=Text("Health", style="bold green"), border_style="green")
