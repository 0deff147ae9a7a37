from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class Charset:
    """Glyphs used to draw a diagnostic.

    ```text
    0 | problem here
      ¦ ───┬─── ^^^^ inline
      ¦    ╰ moved
    ```

    - column_line: gutter next to a source line
    - column_broken_line: gutter next to a label row
    - spanning: caret under an inline label
    - spanning_out: bar of a split marker
    - spanning_mid: midpoint of a split marker
    - out_extension: connector carried down to a later row
    - out_end: elbow that introduces a moved label's message
    - note: marker in front of a note
    """

    column_line: str
    column_broken_line: str
    spanning: str
    spanning_out: str
    spanning_mid: str
    out_extension: str
    out_end: str
    note: str

    def __post_init__(self) -> None:
        for f in fields(self):
            glyph = getattr(self, f.name)
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"charset glyph {f.name!r} must be a single character, got {glyph!r}")

    @classmethod
    def unicode(cls) -> "Charset":
        return cls(
            column_line="|",
            column_broken_line="¦",
            spanning="^",
            spanning_out="─",
            spanning_mid="┬",
            out_extension="│",  # box drawing, not a pipe
            out_end="╰",
            note=">",
        )

    @classmethod
    def ascii(cls) -> "Charset":
        return cls(
            column_line="|",
            column_broken_line=":",
            spanning="^",
            spanning_out="-",
            spanning_mid=".",
            out_extension="|",
            out_end="\\",
            note=">",
        )
