from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .spans import Span


@dataclass(frozen=True, slots=True)
class Line:
    """One physical line: 0-based number, text without its newline, byte span."""

    number: int
    text: str
    span: Span

    def anchors(self, offset: int) -> bool:
        # Inclusive end so a zero-width label on the newline belongs here.
        return self.span.start <= offset <= self.span.end


class Source:
    """Source text addressed by UTF-8 byte offsets.

    Keeps the caller's string; `lines()` re-indexes on every call.
    """

    __slots__ = ("text", "_data")

    def __init__(self, text: str) -> None:
        self.text = text
        self._data = text.encode("utf-8")

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Source({self.text!r})"

    @property
    def line_count(self) -> int:
        if not self.text:
            return 0
        n = self.text.count("\n")
        return n if self.text.endswith("\n") else n + 1

    def is_char_boundary(self, offset: int) -> bool:
        if offset == 0 or offset == len(self._data):
            return True
        if not 0 < offset < len(self._data):
            return False
        # UTF-8 continuation bytes look like 0b10xxxxxx.
        return (self._data[offset] & 0xC0) != 0x80

    def slice(self, start: int, end: int) -> str:
        return self._data[start:end].decode("utf-8")

    def lines(self) -> Iterator[Line]:
        pos = 0
        for number, raw in enumerate(_split_inclusive(self.text)):
            size = len(raw.encode("utf-8"))
            text = raw[:-1] if raw.endswith("\n") else raw
            yield Line(number=number, text=text, span=Span(pos, pos + len(text.encode("utf-8"))))
            pos += size


def _split_inclusive(text: str) -> Iterator[str]:
    # Unlike str.splitlines, only "\n" ends a line and the newline is kept.
    start = 0
    while start < len(text):
        nl = text.find("\n", start)
        if nl < 0:
            yield text[start:]
            return
        yield text[start : nl + 1]
        start = nl + 1
