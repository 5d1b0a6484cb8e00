"""
Module: builder.layout

Purpose:
    Document assembly for question papers.
    Converts config + sections into a structured document of logical
    blocks with pagination hints and placeholders for rendered math.

Key Functions:
    - assemble(): Main entry point
    - option_label(): Label for an option index

Key Classes:
    - StructuredDocument: Assembled document
    - PrintLayoutConfig: Print surface layout configuration

Used By:
    - builder.controller: Main build controller
"""

from .config import PrintLayoutConfig
from .models import (
    AnswerKeyBlock,
    AnswerKeyEntry,
    BlockKind,
    DocumentStyle,
    HeaderBlock,
    InstructionsBlock,
    LayoutHints,
    OptionBlock,
    PageDecorations,
    Placeholder,
    QuestionBlock,
    SectionGroup,
    SectionHeaderBlock,
    StructuredDocument,
)
from .numbering import OptionLabelStyle, AlphabetCase, option_label, placeholder_id
from .composer import assemble, assemble_questions, compose_question, AssemblyError

__all__ = [
    # Config
    "PrintLayoutConfig",
    # Models
    "AnswerKeyBlock",
    "AnswerKeyEntry",
    "BlockKind",
    "DocumentStyle",
    "HeaderBlock",
    "InstructionsBlock",
    "LayoutHints",
    "OptionBlock",
    "PageDecorations",
    "Placeholder",
    "QuestionBlock",
    "SectionGroup",
    "SectionHeaderBlock",
    "StructuredDocument",
    # Numbering
    "OptionLabelStyle",
    "AlphabetCase",
    "option_label",
    "placeholder_id",
    # Functions
    "assemble",
    "assemble_questions",
    "compose_question",
    "AssemblyError",
]
