"""Plain-text and JSON formatting of validation reports."""

from __future__ import annotations

import json as _json
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from valchain.report import ReportEntry

OK_LINE = "OK: no validation errors"


def format_report(entries: Sequence[ReportEntry], *, json_output: bool = False) -> str:
    """Format report entries for display.

    Args:
        entries: Output of :func:`valchain.collect`.
        json_output: If True, return a JSON array of ``{name, messages}``
            objects; otherwise one ``name:`` line per entry followed by
            its messages as ``- message`` lines.
    """
    if json_output:
        payload = [entry.model_dump(mode="json") for entry in entries]
        return _json.dumps(payload, indent=2)
    if not entries:
        return OK_LINE
    lines: list[str] = []
    for entry in entries:
        lines.append(f"{entry.name}:")
        lines.extend(f"  - {message}" for message in entry.messages)
    return "\n".join(lines)
