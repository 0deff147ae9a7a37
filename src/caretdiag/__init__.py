from __future__ import annotations

from .api import Diagnostic, create
from .charset import Charset
from .errors import DiagnosticError, LabelOutOfBounds, OverlappingLabels
from .source import Line, Source
from .spans import Label, Note, Span
from .style import ChalkStyler, PlainStyler, Role, display_width, resolve_styler, strip_styles

__all__ = [
    "ChalkStyler",
    "Charset",
    "Diagnostic",
    "DiagnosticError",
    "Label",
    "LabelOutOfBounds",
    "Line",
    "Note",
    "OverlappingLabels",
    "PlainStyler",
    "Role",
    "Source",
    "Span",
    "create",
    "display_width",
    "resolve_styler",
    "strip_styles",
]
