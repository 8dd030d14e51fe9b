"""Source span type shared across layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` into the parsed source."""

    start: int
    end: int

    def extract(self, source: str) -> str:
        return source[self.start : self.end]

    def to(self, other: Span) -> Span:
        """Span from the start of ``self`` to the end of ``other``."""

        return Span(self.start, other.end)

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"
