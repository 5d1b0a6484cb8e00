"""
Module: builder.layout.models

Purpose:
    Data models for the structured document handed to the print surface.
    Immutable dataclasses representing logical blocks, their layout hints,
    and the placeholders that rendered math is substituted into.

Key Classes:
    - Placeholder: Named slot for one rendered string
    - LayoutHints: Declarative pagination hints (avoid break, page break)
    - HeaderBlock / InstructionsBlock / SectionHeaderBlock: Fixed blocks
    - QuestionBlock / OptionBlock: One numbered question and its options
    - SectionGroup: Section header plus its questions
    - AnswerKeyBlock / AnswerKeyEntry: Trailing answer key
    - PageDecorations: Watermark and footer repeated on every page
    - DocumentStyle: Font settings
    - StructuredDocument: Complete assembled document

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.composer: Creates the document
    - builder.output.answer_key: Creates AnswerKeyBlock
    - builder.rendering.adapter: Renders placeholders
    - builder.output.html: Emits markup
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Union

from mcq_toolkit.builder.config import AnswerKeyMode, FontWeight


class BlockKind(Enum):
    HEADER = "header"
    INSTRUCTIONS = "instructions"
    SECTION_HEADER = "section-header"
    QUESTION = "question"
    ANSWER_KEY = "answer-key"


@dataclass(frozen=True)
class Placeholder:
    """
    Slot for one rendered string.

    The assembler emits placeholders instead of rendered math so a style
    change only needs the render adapter to run again.

    Attributes:
        id: Stable identifier derived from (question_id, role)
        question_id: Owning question
        role: "question-text", "option-<index>" or "explanation"
        source: Raw mixed text/math to render
    """

    id: str
    question_id: str
    role: str
    source: str


@dataclass(frozen=True)
class LayoutHints:
    """
    Pagination hints the presentation layer must honor.

    Attributes:
        avoid_break_inside: Block must not be split across pages/columns
        page_break_before: Block starts on a new page
        span_all_columns: Block spans the full page width
    """

    avoid_break_inside: bool = False
    page_break_before: bool = False
    span_all_columns: bool = False


KEEP_TOGETHER = LayoutHints(avoid_break_inside=True)
FULL_WIDTH = LayoutHints(span_all_columns=True)
NEW_PAGE = LayoutHints(page_break_before=True, span_all_columns=True)


@dataclass(frozen=True)
class HeaderBlock:
    title: str
    lines: tuple[str, ...] = ()
    hints: LayoutHints = FULL_WIDTH
    kind: BlockKind = field(default=BlockKind.HEADER, init=False)


@dataclass(frozen=True)
class InstructionsBlock:
    text: str
    hints: LayoutHints = FULL_WIDTH
    kind: BlockKind = field(default=BlockKind.INSTRUCTIONS, init=False)


@dataclass(frozen=True)
class SectionHeaderBlock:
    name: str
    section_index: int
    hints: LayoutHints = KEEP_TOGETHER
    kind: BlockKind = field(default=BlockKind.SECTION_HEADER, init=False)


@dataclass(frozen=True)
class OptionBlock:
    """
    One option row.

    Attributes:
        index: 0-based option index
        label: Display label, e.g. "B)" or "(ii)"
        placeholder: Slot for the option text
        image: Optional image URL
    """

    index: int
    label: str
    placeholder: Placeholder
    image: Optional[str] = None


@dataclass(frozen=True)
class QuestionBlock:
    """
    One numbered question including its options (never split).

    Attributes:
        number: Global 1-based question number
        question_id: Source question id
        section_index: Index of the owning section
        text: Slot for the question text
        options: Option rows in display order
        image: Optional question image URL
    """

    number: int
    question_id: str
    section_index: int
    text: Placeholder
    options: tuple[OptionBlock, ...]
    image: Optional[str] = None
    hints: LayoutHints = KEEP_TOGETHER
    kind: BlockKind = field(default=BlockKind.QUESTION, init=False)


@dataclass(frozen=True)
class SectionGroup:
    """
    A section's header (absent for unnamed sections) and its questions.
    """

    index: int
    name: str
    header: Optional[SectionHeaderBlock]
    questions: tuple[QuestionBlock, ...]

    @property
    def number_range(self) -> tuple[int, int]:
        """(first, last) question number, or (0, 0) when empty."""
        if not self.questions:
            return (0, 0)
        return (self.questions[0].number, self.questions[-1].number)


@dataclass(frozen=True)
class AnswerKeyEntry:
    """
    One line of the answer key.

    Attributes:
        number: Global question number
        question_id: Source question id
        option_index: Resolved 0-based index, or None if unresolved
        label: Option label, '' when unresolved
        explanation: Slot for the explanation (KEY_AND_EXPLANATION only)
    """

    number: int
    question_id: str
    option_index: Optional[int]
    label: str
    explanation: Optional[Placeholder] = None

    @property
    def resolved(self) -> bool:
        return self.option_index is not None


@dataclass(frozen=True)
class AnswerKeyBlock:
    mode: AnswerKeyMode
    entries: tuple[AnswerKeyEntry, ...]
    hints: LayoutHints = NEW_PAGE
    kind: BlockKind = field(default=BlockKind.ANSWER_KEY, init=False)

    @property
    def title(self) -> str:
        if self.mode is AnswerKeyMode.KEY_AND_EXPLANATION:
            return "Answer Key & Explanations"
        return "Answer Key"

    @property
    def unresolved(self) -> tuple[AnswerKeyEntry, ...]:
        return tuple(e for e in self.entries if not e.resolved)


@dataclass(frozen=True)
class PageDecorations:
    """
    Decorations applied uniformly to every output page, never per block.

    Attributes:
        watermark: Watermark text, or None when disabled
        footer: Footer lines
    """

    watermark: Optional[str] = None
    footer: tuple[str, ...] = ()


@dataclass(frozen=True)
class DocumentStyle:
    font_size: int
    font_weight: FontWeight
    font_color: str

    @property
    def question_number_font_size(self) -> int:
        return self.font_size + 1

    @property
    def option_font_size(self) -> int:
        return max(1, self.font_size - 1)


Block = Union[HeaderBlock, InstructionsBlock, SectionHeaderBlock, QuestionBlock, AnswerKeyBlock]


@dataclass(frozen=True)
class StructuredDocument:
    """
    Complete assembled document (immutable).

    Attributes:
        header: Title and header lines
        instructions: Instructions block, None when blank
        sections: Section groups in document order
        answer_key: Trailing answer key, None for AnswerKeyMode.NONE
        decorations: Watermark and footer for every page
        style: Font settings
        placeholders: Every placeholder in document order

    Example:
        >>> doc = assemble(config, sections)
        >>> [b.kind.value for b in doc.blocks()][:3]
        ['header', 'instructions', 'section-header']
    """

    header: HeaderBlock
    instructions: Optional[InstructionsBlock]
    sections: tuple[SectionGroup, ...]
    answer_key: Optional[AnswerKeyBlock]
    decorations: PageDecorations
    style: DocumentStyle
    placeholders: tuple[Placeholder, ...]

    @property
    def question_count(self) -> int:
        return sum(len(s.questions) for s in self.sections)

    def iter_questions(self) -> Iterator[QuestionBlock]:
        for section in self.sections:
            yield from section.questions

    def blocks(self) -> Iterator[Block]:
        """All logical blocks in document order."""
        yield self.header
        if self.instructions is not None:
            yield self.instructions
        for section in self.sections:
            if section.header is not None:
                yield section.header
            yield from section.questions
        if self.answer_key is not None:
            yield self.answer_key

    @property
    def placeholder_map(self) -> Dict[str, Placeholder]:
        return {p.id: p for p in self.placeholders}

    def placeholder(self, placeholder_id: str) -> Optional[Placeholder]:
        return self.placeholder_map.get(placeholder_id)
