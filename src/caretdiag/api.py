from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from .charset import Charset
from .errors import LabelOutOfBounds
from .format import format_diagnostic
from .source import Source
from .spans import Label, Note, Span, SpanLike
from .style import Styler, resolve_styler, strip_styles


@dataclass(slots=True)
class Diagnostic:
    """A message, labeled spans over one source text, and trailing notes.

    Setters validate eagerly and return the diagnostic so calls chain:

        create(src).set_message("oops").add_label(range(0, 4), "here").render()

    Rendering only reads state; it can be repeated and gives the same text.
    """

    source: Source
    message: str = ""
    labels: list[Label] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)
    charset: Charset = field(default_factory=Charset.unicode)

    def __post_init__(self) -> None:
        if isinstance(self.source, str):
            self.source = Source(self.source)

    def set_message(self, message: object) -> Diagnostic:
        self.message = str(message)
        return self

    def set_charset(self, charset: Charset) -> Diagnostic:
        self.charset = charset
        return self

    def add_label(
        self,
        span: SpanLike | Label | tuple[SpanLike, str],
        message: object | None = None,
    ) -> Diagnostic:
        label = _to_label(span, message)
        self._check_bounds(label.span)
        self.labels.append(label)
        return self

    def add_note(self, note: object) -> Diagnostic:
        self.notes.append(Note(message=str(note)))
        return self

    def render(self, styler: Styler | None = None) -> str:
        return format_diagnostic(self, styler if styler is not None else resolve_styler())

    def render_plain(self) -> str:
        return strip_styles(self.render())

    def write(self, stream: TextIO, styler: Styler | None = None) -> None:
        stream.write(self.render(styler))

    def __str__(self) -> str:
        return self.render()

    def _check_bounds(self, span: Span) -> None:
        size = len(self.source)
        if span.end > size:
            raise LabelOutOfBounds(span=span, source_len=size)
        if span.start < 0 or span.start > span.end:
            raise LabelOutOfBounds(span=span, source_len=size, reason="label span must satisfy 0 <= start <= end")
        if not (self.source.is_char_boundary(span.start) and self.source.is_char_boundary(span.end)):
            raise LabelOutOfBounds(span=span, source_len=size, reason="label span must fall on character boundaries")


def create(source: str) -> Diagnostic:
    return Diagnostic(source=Source(source))


def _to_label(span: SpanLike | Label | tuple[SpanLike, str], message: object | None) -> Label:
    if isinstance(span, Label):
        if message is not None:
            raise TypeError("add_label() got a Label and a separate message")
        return span
    if message is None:
        if isinstance(span, tuple) and len(span) == 2 and isinstance(span[1], str):
            span, message = span
        else:
            raise TypeError("add_label() needs a message")
    return Label(span=Span.coerce(span), message=str(message))
