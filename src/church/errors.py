"""Error types shared across the numeral library."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class ChurchError(Exception):
    """Base class for errors raised by the numeral library."""


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def extract(self, source: str) -> str:
        return source[self.start : self.end]


@dataclass
class InvalidElementTypeError(ChurchError):
    """The extractor could not produce a seed value of ``element_type``."""

    element_type: Any
    reason: str

    def __str__(self) -> str:
        name = getattr(self.element_type, "__qualname__", repr(self.element_type))
        return f"Cannot seed evaluation with a value of {name}: {self.reason}"


@dataclass
class SurfaceError(ChurchError):
    message: str
    span: Span
    source: str | None = None

    def __str__(self) -> str:
        if self.source is None:
            return f"{self.message} @ {self.span.start}:{self.span.end}"
        snippet = self.span.extract(self.source)
        return f"{self.message} @ {self.span.start}:{self.span.end}: {snippet!r}"
