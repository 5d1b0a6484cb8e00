"""
Module: segments

Purpose:
    Typed slice of a mixed text/math string, produced by the delimiter
    scanner and consumed by the math render adapter. Never persisted.

Key Classes:
    - SegmentKind: TEXT or MATH
    - Segment: kind + display flag + content
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    """Whether a segment is plain text or math source."""

    TEXT = "text"
    MATH = "math"


@dataclass(frozen=True)
class Segment:
    """
    One ordered piece of a scanned string (immutable).

    Attributes:
        kind: TEXT or MATH
        content: Raw content without the surrounding delimiters
        display_mode: True for `$$...$$` math; always False for text

    Example:
        >>> Segment.math("x^2", display_mode=True)
        Segment(kind=<SegmentKind.MATH: 'math'>, content='x^2', display_mode=True)
    """

    kind: SegmentKind
    content: str
    display_mode: bool = False

    def __post_init__(self) -> None:
        if self.kind is SegmentKind.TEXT and self.display_mode:
            raise ValueError("display_mode only applies to math segments")

    @classmethod
    def text(cls, content: str) -> Segment:
        return cls(SegmentKind.TEXT, content)

    @classmethod
    def math(cls, content: str, display_mode: bool = False) -> Segment:
        return cls(SegmentKind.MATH, content, display_mode)

    @property
    def is_math(self) -> bool:
        return self.kind is SegmentKind.MATH

    @property
    def delimiter(self) -> str:
        """Delimiter that wraps this segment in source text ('' for text)."""
        if not self.is_math:
            return ""
        return "$$" if self.display_mode else "$"

    def to_source(self) -> str:
        """Re-insert delimiters, giving back the source form of the segment."""
        return f"{self.delimiter}{self.content}{self.delimiter}"
