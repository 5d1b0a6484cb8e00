"""
Module: builder.layout.composer

Purpose:
    Assemble the structured document from config and sections.
    Computes global numbering, option labels and placeholders, and marks
    every block with its pagination hints. No math is rendered here.

Key Functions:
    - compose_question(): QuestionBlock for a single question
    - assemble(): Main entry point for a whole paper
    - assemble_questions(): Convenience wrapper for flat question lists

Dependencies:
    - builder.layout.models: Document blocks
    - builder.layout.numbering: Labels and placeholder ids
    - builder.output.answer_key: Trailing answer key

Used By:
    - builder.controller: build_paper()
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Set

from mcq_toolkit.core.models import Question, Section
from mcq_toolkit.core.models.sections import iter_questions, sections_from_questions
from mcq_toolkit.builder.config import DocumentConfig
from mcq_toolkit.builder.output import answer_key as answer_keys

from .models import (
    DocumentStyle,
    HeaderBlock,
    InstructionsBlock,
    OptionBlock,
    PageDecorations,
    Placeholder,
    QuestionBlock,
    SectionGroup,
    SectionHeaderBlock,
    StructuredDocument,
)
from .numbering import (
    QUESTION_TEXT_ROLE,
    option_label,
    option_role,
    placeholder_id,
)

logger = logging.getLogger(__name__)


class AssemblyError(Exception):
    """The inputs cannot be assembled into any document."""
    pass


def _placeholder(question: Question, role: str, source: str) -> Placeholder:
    return Placeholder(
        id=placeholder_id(question.id, role),
        question_id=question.id,
        role=role,
        source=source or "",
    )


def compose_question(
    question: Question,
    number: int,
    section_index: int,
    numbering_style: str,
) -> QuestionBlock:
    """
    Create the block for one question.

    Absent images produce no image field; option text is always given a
    placeholder because the option row itself is always shown.

    Args:
        question: Source question
        number: Global 1-based question number
        section_index: Index of the owning section
        numbering_style: Option numbering style token

    Returns:
        QuestionBlock marked as non-splittable
    """
    options = tuple(
        OptionBlock(
            index=index,
            label=option_label(index, numbering_style),
            placeholder=_placeholder(question, option_role(index), option.text),
            image=option.image or None,
        )
        for index, option in enumerate(question.options)
    )

    return QuestionBlock(
        number=number,
        question_id=question.id,
        section_index=section_index,
        text=_placeholder(question, QUESTION_TEXT_ROLE, question.question_text),
        options=options,
        image=question.question_image or None,
    )


def _check_unique_ids(sections: Sequence[Section]) -> None:
    seen: Set[str] = set()
    for question in iter_questions(sections):
        if question.id in seen:
            raise AssemblyError(
                f"Duplicate question id {question.id!r}: ids must be unique within one document"
            )
        seen.add(question.id)


def assemble(config: DocumentConfig, sections: Sequence[Section]) -> StructuredDocument:
    """
    Assemble a complete document.

    Numbering is 1-based and continues across sections in order; section
    boundaries only add a header block for named sections.

    Args:
        config: Document configuration
        sections: Sections in display order

    Returns:
        StructuredDocument with every placeholder listed in document order

    Raises:
        AssemblyError: No questions at all, or duplicate question ids

    Example:
        >>> doc = assemble(config, [physics, chemistry])  # 3 + 2 questions
        >>> [q.number for q in doc.iter_questions()]
        [1, 2, 3, 4, 5]
    """
    sections = list(sections)
    questions = list(iter_questions(sections))
    if not questions:
        raise AssemblyError("No questions to assemble: add at least one question")

    _check_unique_ids(sections)

    placeholders: List[Placeholder] = []
    groups: List[SectionGroup] = []
    number = 0

    for section_index, section in enumerate(sections):
        header = (
            SectionHeaderBlock(name=section.name.strip(), section_index=section_index)
            if section.is_named else None
        )

        blocks: List[QuestionBlock] = []
        for question in section.questions:
            number += 1
            block = compose_question(
                question, number, section_index, config.option_numbering_style
            )
            placeholders.append(block.text)
            placeholders.extend(option.placeholder for option in block.options)
            blocks.append(block)

        groups.append(SectionGroup(
            index=section_index,
            name=section.name,
            header=header,
            questions=tuple(blocks),
        ))

    answer_key = answer_keys.build_answer_key(
        questions, config.answer_key_display_mode, config.option_numbering_style
    )
    if answer_key is not None:
        placeholders.extend(e.explanation for e in answer_key.entries if e.explanation)

    instructions = (
        InstructionsBlock(text=config.instructions)
        if config.instructions and config.instructions.strip() else None
    )

    document = StructuredDocument(
        header=HeaderBlock(title=config.paper_title, lines=config.header_lines),
        instructions=instructions,
        sections=tuple(groups),
        answer_key=answer_key,
        decorations=PageDecorations(
            watermark=config.watermark.text if config.watermark.is_visible else None,
            footer=config.footer_lines,
        ),
        style=DocumentStyle(
            font_size=config.font_size,
            font_weight=config.font_weight,
            font_color=config.font_color,
        ),
        placeholders=tuple(placeholders),
    )

    logger.info(
        f"Assembled {document.question_count} questions in {len(groups)} sections "
        f"with {len(placeholders)} placeholders"
    )
    return document


def assemble_questions(config: DocumentConfig, questions: Sequence[Question]) -> StructuredDocument:
    """Assemble a flat question list as one implicit unnamed section."""
    return assemble(config, sections_from_questions(questions))
