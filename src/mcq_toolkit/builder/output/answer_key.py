"""
Module: builder.output.answer_key

Purpose:
    Build the trailing answer key block from stored answer data.

Key Functions:
    - resolve_correct_index(): Correct option index for one question
    - build_answer_key(): AnswerKeyBlock for all questions (or None)

Resolution order:
    1. Option whose text exactly equals `correct_answer`
    2. `correct_answer` read as a letter ('A' -> 0, case-insensitive)
    3. Otherwise unresolved: the entry keeps a blank label and a warning is
       logged. No option is ever guessed.

Dependencies:
    - builder.layout.numbering: Labels and placeholder ids

Used By:
    - builder.layout.composer: assemble()
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from mcq_toolkit.core.models import Question
from mcq_toolkit.builder.config import AnswerKeyMode
from mcq_toolkit.builder.layout.models import AnswerKeyBlock, AnswerKeyEntry, Placeholder
from mcq_toolkit.builder.layout.numbering import (
    EXPLANATION_ROLE,
    letter_to_index,
    option_label,
    placeholder_id,
)

logger = logging.getLogger(__name__)

UNRESOLVED_LABEL = ""


def resolve_correct_index(question: Question) -> Optional[int]:
    """
    Resolve the correct option index of a question.

    Returns:
        0-based index, or None when neither text nor letter matches
    """
    answer = question.correct_answer
    if answer is None:
        return None

    for index, option in enumerate(question.options):
        if option.text == answer:
            return index

    index = letter_to_index(answer)
    if index is not None and index < question.option_count:
        return index
    return None


def _explanation_placeholder(question: Question) -> Optional[Placeholder]:
    if not question.has_explanation:
        return None
    return Placeholder(
        id=placeholder_id(question.id, EXPLANATION_ROLE),
        question_id=question.id,
        role=EXPLANATION_ROLE,
        source=question.explanation,
    )


def build_answer_key(
    questions: Iterable[Question],
    mode: AnswerKeyMode,
    numbering_style: str,
) -> Optional[AnswerKeyBlock]:
    """
    Build the answer key for questions in document order.

    Question numbers are 1-based positions in `questions`, which matches
    the global numbering the assembler uses.

    Args:
        questions: All questions, across sections, in document order
        mode: Answer key mode
        numbering_style: Option numbering style token, e.g. "A)"

    Returns:
        AnswerKeyBlock, or None when mode is NONE

    Example:
        >>> block = build_answer_key(questions, AnswerKeyMode.KEY_ONLY, "A)")
        >>> [f"{e.number}. {e.label}" for e in block.entries]
        ['1. B)', '2. D)']
    """
    if mode is AnswerKeyMode.NONE:
        return None

    with_explanations = mode is AnswerKeyMode.KEY_AND_EXPLANATION
    entries: List[AnswerKeyEntry] = []

    for number, question in enumerate(questions, start=1):
        index = resolve_correct_index(question)
        if index is None:
            logger.warning(
                f"Could not resolve correct answer {question.correct_answer!r} "
                f"for question {number} ({question.id}); leaving it blank"
            )
            label = UNRESOLVED_LABEL
        else:
            label = option_label(index, numbering_style)

        entries.append(AnswerKeyEntry(
            number=number,
            question_id=question.id,
            option_index=index,
            label=label,
            explanation=_explanation_placeholder(question) if with_explanations else None,
        ))

    block = AnswerKeyBlock(mode=mode, entries=tuple(entries))
    logger.debug(
        f"Built {mode.value} answer key with {len(entries)} entries "
        f"({len(block.unresolved)} unresolved)"
    )
    return block
