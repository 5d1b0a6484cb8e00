"""
Core Models Package

Immutable, validated data models that serve as the single source of truth.

| Model | Role |
|-------|------|
| `Option` | One answer choice (text + optional image) |
| `Question` | Question text, 2-5 options, answer data, explanation |
| `Section` | Named, ordered group of questions |
| `Segment` | Typed slice of a mixed text/math string |
"""

from .questions import Option, Question, MIN_OPTIONS, MAX_OPTIONS
from .sections import Section, sections_from_questions, group_by_section_name, iter_questions
from .segments import Segment, SegmentKind

__all__ = [
    "Option",
    "Question",
    "MIN_OPTIONS",
    "MAX_OPTIONS",
    "Section",
    "sections_from_questions",
    "group_by_section_name",
    "iter_questions",
    "Segment",
    "SegmentKind",
]
