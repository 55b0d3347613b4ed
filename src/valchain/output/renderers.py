"""Rich table rendering for validation reports.

The renderer writes to a StringIO-backed Console and returns the text.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from valchain.output.console import create_console, get_output

if TYPE_CHECKING:
    from valchain.report import ReportEntry


def render_report(
    entries: Sequence[ReportEntry],
    *,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render report entries as a two-column (field, message) table.

    A field with several messages gets one row per message; the field name
    is only printed on its first row.  Returns plain text (no ANSI) when
    Rich detects no terminal.
    """
    console = create_console(no_color=no_color, width=width)

    if not entries:
        console.print(Text("OK", style="valchain.ok"), Text("  no validation errors"))
        return get_output(console).rstrip("\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Field", style="valchain.field", no_wrap=True)
    table.add_column("Message", style="valchain.message")
    total = 0
    for entry in entries:
        for index, message in enumerate(entry.messages):
            table.add_row(entry.name if index == 0 else "", message)
            total += 1

    console.print(table)
    summary = f"{total} error(s) in {len(entries)} field(s)"
    console.print(Text(summary, style="valchain.count"))
    return get_output(console).rstrip("\n")
