from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte range [start, end) into the UTF-8 encoded source."""

    start: int
    end: int

    @classmethod
    def coerce(cls, value: "SpanLike") -> "Span":
        if isinstance(value, Span):
            return value
        if isinstance(value, range):
            if value.step != 1:
                raise ValueError(f"span range must have step 1, got {value!r}")
            return cls(value.start, value.stop)
        start, end = value
        return cls(int(start), int(end))

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def is_empty(self) -> bool:
        return self.start == self.end

    def __len__(self) -> int:
        return self.end - self.start

    def format(self) -> str:
        return f"{self.start}..{self.end}"


SpanLike = Span | range | tuple[int, int]


@dataclass(frozen=True, slots=True)
class Label:
    span: Span
    message: str

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.span.start, self.span.end)


@dataclass(frozen=True, slots=True)
class Note:
    message: str
