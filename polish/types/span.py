from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range of offsets into the source text.

    Offsets count Python characters, not UTF-8 bytes; they coincide for ASCII
    source and index the decoded `str` directly.
    """

    start: int
    end: int

    def union(self, other: Span) -> Span:
        return Span(min(self.start, other.start), max(self.end, other.end))

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self):
        return f"{self.start}..{self.end}"
