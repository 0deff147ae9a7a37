"""Caret row layout for a single source line.

A line's labels become one primary row and zero or more extension rows:

```text
0 | Strin::nouveau().i_like_tests(3.14158)
  : --.--  ----.---- ^ caps: I    ^^^^^^^ your π is bad
  :   |        \\ use new()
  :   \\ you probably meant String
```

A label whose carets and message fit before the next label's column is drawn
inline. Otherwise it gets a split marker on the primary row and is deferred;
deferred labels are resolved one extension row at a time, each row closing
every label whose elbow and message clear the labels still to its right.

All arithmetic is in display columns. Rows are lists of `(text, role)`
segments; styling is applied later by a `Styler`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .charset import Charset
from .source import Line, Source
from .spans import Label
from .style import Role, display_width


logger = logging.getLogger(__name__)

Segment = tuple[str, Role | None]
Row = list[Segment]


@dataclass(frozen=True, slots=True)
class Measured:
    label: Label
    column: int  # display column of the label start within its line
    point: int  # caret run width
    msg_width: int


@dataclass(frozen=True, slots=True)
class Deferred:
    label: Label
    column: int  # column the split marker starts at
    connector: int  # offset of the midpoint glyph from `column`
    msg_width: int

    @property
    def anchor(self) -> int:
        return self.column + self.connector


def measure(source: Source, line: Line, label: Label) -> Measured:
    start = label.span.start
    column = display_width(source.slice(line.span.start, start))
    # Only the part of the span on this line is underlined.
    end = min(label.span.end, line.span.end)
    point = display_width(source.slice(start, end)) if end > start else 0
    # Empty spans, and spans of only zero-width characters, still get one mark.
    if point == 0:
        point = 1
    return Measured(label=label, column=column, point=point, msg_width=display_width(label.message))


def split_marker(point: int, charset: Charset) -> str:
    bar = max(point - 1, 0)
    left = bar // 2
    return charset.spanning_out * left + charset.spanning_mid + charset.spanning_out * (bar - left)


def layout_line(source: Source, line: Line, labels: Iterable[Label], charset: Charset) -> list[Row]:
    """Return the primary row followed by its extension rows."""
    measured = sorted((measure(source, line, lb) for lb in labels), key=lambda m: m.label.sort_key)
    primary, deferred = _primary_row(measured, charset)
    rows = [primary]
    rows.extend(_extension_rows(deferred, charset))
    if deferred:
        logger.debug(
            "line %d: %d label(s) deferred over %d extension row(s)",
            line.number,
            len(deferred),
            len(rows) - 1,
        )
    return rows


def _primary_row(measured: list[Measured], charset: Charset) -> tuple[Row, list[Deferred]]:
    row: Row = []
    deferred: list[Deferred] = []
    position = 0
    for i, m in enumerate(measured):
        pad = max(0, m.column - position)
        if pad:
            row.append((" " * pad, None))
        position += pad
        at = position

        nxt = measured[i + 1] if i + 1 < len(measured) else None
        if nxt is not None and at + m.point + m.msg_width + 1 > nxt.column:
            row.append((split_marker(m.point, charset), Role.EMPHASIS))
            deferred.append(
                Deferred(label=m.label, column=at, connector=max(m.point - 1, 0) // 2, msg_width=m.msg_width)
            )
            position += m.point
            continue

        row.append((charset.spanning * m.point, Role.EMPHASIS))
        row.append((" " + m.label.message, None))
        position += m.point + 1 + m.msg_width
    return row, deferred


def _extension_rows(deferred: list[Deferred], charset: Charset) -> list[Row]:
    rows: list[Row] = []
    queue = list(deferred)
    while queue:
        row: Row = []
        kept: list[Deferred] = []
        position = 0
        for i, d in enumerate(queue):
            pad = max(0, d.anchor - position)
            if pad:
                row.append((" " * pad, None))
            position += pad

            if any(d.anchor + d.msg_width + 2 > later.column for later in queue[i + 1 :]):
                # Just the glyph: the next anchor may be one column away.
                row.append((charset.out_extension, Role.EMPHASIS))
                position += 1
                kept.append(d)
                continue

            row.append((charset.out_end + " ", Role.EMPHASIS))
            row.append((d.label.message, None))
            position += 2 + d.msg_width
        rows.append(row)
        # The last entry never collides, so the queue shrinks every row.
        queue = kept
    return rows
