"""Output renderers."""

from docmatter.output.console import render_console_report
from docmatter.output.json_export import export_json_report

__all__ = ["export_json_report", "render_console_report"]
