from __future__ import annotations

import json

from rich.console import Console
from rich.table import Table

from docmatter.models.document import DocumentReport


def _preview(text: str | None, limit: int = 60) -> str:
    if text is None:
        return "-"
    flat = text.replace("\r", "").replace("\n", "\\n")
    if len(flat) > limit:
        return flat[: limit - 3] + "..."
    return flat


def render_console_report(report: DocumentReport, *, title: str = "docmatter", no_color: bool = False) -> None:
    console = Console(no_color=no_color)
    table = Table(title=title)
    table.add_column("Field")
    table.add_column("Value")

    table.add_row("Front matter", "yes" if report.has_matter else "no")
    table.add_row("Language", report.language or "-")
    table.add_row("Directive", report.directive.name or "-")
    table.add_row("Empty", "yes" if report.is_empty else "no")
    table.add_row("Keys", str(len(report.data)))
    table.add_row("Excerpt", _preview(report.excerpt))
    table.add_row("Content", _preview(report.content))
    console.print(table)

    if report.data:
        console.print("Data:")
        console.print_json(json.dumps(report.data, default=str))
