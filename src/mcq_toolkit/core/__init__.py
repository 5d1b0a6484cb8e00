"""
MCQ Toolkit Core Package

Shared data models and schema validation used by every builder stage.

**DESIGN NOTES:**

1. **Immutable Inputs**
   Questions, options and sections are frozen dataclasses. The builder
   never mutates them; it only derives numbering and rendered output.

2. **Transient Segments**
   `Segment` values are produced by the delimiter scanner on demand and
   are never persisted.
"""

from .models import Option, Question, Section, Segment, SegmentKind

__all__ = [
    "Option",
    "Question",
    "Section",
    "Segment",
    "SegmentKind",
]
