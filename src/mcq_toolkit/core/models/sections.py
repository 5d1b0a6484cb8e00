"""
Module: sections

Purpose:
    Section dataclass and helpers for turning flat question lists into
    sections. A flat list is modelled as one implicit unnamed section so
    the assembler only ever deals with sections.

Key Functions:
    - sections_from_questions(): Wrap a flat list as one unnamed section
    - group_by_section_name(): Split a flat list into consecutive sections

Used By:
    - builder.layout.composer: Document assembly
    - builder.loading.importer: JSON import mapping
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from .questions import Question


@dataclass(frozen=True)
class Section:
    """
    Named, ordered group of questions (immutable).

    Attributes:
        name: Section heading; empty for the implicit section of a flat list
        questions: Questions in display order
    """

    name: str
    questions: tuple[Question, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))
        if self.name is None:
            object.__setattr__(self, "name", "")

    @property
    def is_named(self) -> bool:
        return bool(self.name and self.name.strip())

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self.questions)


def sections_from_questions(questions: Iterable[Question]) -> list[Section]:
    """
    Wrap a flat question list as a single implicit unnamed section.

    Returns an empty list when there are no questions.
    """
    items = tuple(questions)
    if not items:
        return []
    return [Section(name="", questions=items)]


def group_by_section_name(questions: Sequence[Question]) -> list[Section]:
    """
    Group a flat question list into sections by `Question.section_name`.

    Only consecutive runs are merged, so document order is preserved even
    when a section name reappears later in the list.

    Example:
        >>> [s.name for s in group_by_section_name(qs)]
        ['Physics', 'Chemistry', 'Physics']
    """
    sections: List[Section] = []
    current_name: str | None = None
    current: List[Question] = []

    for question in questions:
        name = question.section_name or ""
        if current and name != current_name:
            sections.append(Section(name=current_name or "", questions=tuple(current)))
            current = []
        current_name = name
        current.append(question)

    if current:
        sections.append(Section(name=current_name or "", questions=tuple(current)))

    return sections


def iter_questions(sections: Iterable[Section]) -> Iterator[Question]:
    """Iterate questions across sections in document order."""
    for section in sections:
        yield from section.questions
