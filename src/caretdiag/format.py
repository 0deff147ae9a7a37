from __future__ import annotations

from typing import TYPE_CHECKING

from .grouping import group_labels
from .layout import Row, layout_line
from .style import Role, Styler

if TYPE_CHECKING:
    from .api import Diagnostic


def format_diagnostic(diag: Diagnostic, styler: Styler) -> str:
    out: list[str] = [styler(diag.message, Role.HEADING)]

    charset = diag.charset
    width = len(str(max(diag.source.line_count, 1)))
    gutter = _gutter(width, charset.column_broken_line, styler)

    for line, labels in group_labels(diag.source, diag.labels):
        head = styler(f"{line.number:>{width}} {charset.column_line} ", Role.MUTED)
        out.append(head + line.text)
        for row in layout_line(diag.source, line, labels, charset):
            out.append(gutter + _format_row(row, styler))

    # Notes never interact with label columns.
    note_prefix = _gutter(width, charset.note, styler)
    for note in diag.notes:
        out.append(note_prefix + note.message)

    return "\n".join(out) + "\n"


def _gutter(width: int, glyph: str, styler: Styler) -> str:
    return " " * width + " " + styler(glyph, Role.MUTED) + " "


def _format_row(row: Row, styler: Styler) -> str:
    return "".join(styler(text, role) for text, role in row)
