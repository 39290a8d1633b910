from __future__ import annotations

import json
from pathlib import Path

from docmatter.models.document import DocumentReport


def export_json_report(report: DocumentReport, *, source: Path | None = None, output: str | None = None) -> str:
    """Serialize a parsed document, tagged with the file it was read from."""
    document: dict[str, object] = {"source": str(source) if source else None}
    document.update(report.model_dump(mode="json"))
    payload = json.dumps(document, indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(payload, encoding="utf-8")
    return payload
