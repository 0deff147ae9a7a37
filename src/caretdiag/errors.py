from __future__ import annotations

from dataclasses import dataclass

from .spans import Span


class DiagnosticError(Exception):
    """Base class for misuse of the diagnostic builder."""


@dataclass(slots=True)
class LabelOutOfBounds(DiagnosticError):
    span: Span
    source_len: int
    reason: str = "label must be in bounds"

    def __str__(self) -> str:
        return f"{self.span.format()}: {self.reason} (source is {self.source_len} bytes)"


@dataclass(slots=True)
class OverlappingLabels(DiagnosticError):
    span: Span
    placed: Span

    def __str__(self) -> str:
        return (
            f"{self.span.format()}: labels may not overlap, "
            f"starts inside {self.placed.format()} from an earlier line"
        )
