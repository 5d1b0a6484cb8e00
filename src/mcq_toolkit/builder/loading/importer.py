"""
Module: builder.loading.importer

Purpose:
    Map a quiz JSON export (backend format) onto Questions, Sections and
    document settings. Import never raises: every failure is reported as
    an unsuccessful ImportResult with a user-facing message.

Key Functions:
    - parse_quiz_json(): Parse and map a JSON string
    - sample_quiz_json(): Bundled demonstration payload

Key Classes:
    - ImportResult: Outcome of one import

Payload shape:
    {"quiz": {"title": ..., "metadata": {"header": [...], "instructions": [...],
     "footer": [...], "watermark": {"enabled": ..., "text": ...}},
     "sections": [{"name": ..., "questions": [{"_id": ..., "question_text": ...,
     "option_a": ..., ..., "correct_answer": ..., "explanation": ...}]}]}}

Dependencies:
    - json (std)
    - core.schemas: Payload validation (jsonschema)
    - core.models: Question, Option, Section

Used By:
    - builder.controller callers (CLI, services)
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from mcq_toolkit.core.models import Option, Question, Section
from mcq_toolkit.core.schemas.validator import ValidationError, validate_quiz_payload
from mcq_toolkit.builder.config import DocumentConfig, Watermark

logger = logging.getLogger(__name__)

SAMPLE_QUIZ_PATH = Path(__file__).parent / "sample_quiz.json"

# Backend exports double-escape backslashes; literal `\\` pairs are noise
ESCAPED_LINE_BREAK = "\\\\"

REQUIRED_OPTION_KEYS = ("a", "b", "c", "d")
OPTIONAL_OPTION_KEY = "e"


@dataclass(frozen=True)
class ImportResult:
    """
    Outcome of a quiz import.

    Attributes:
        success: False when the payload could not be read at all
        message: User-facing status message
        paper_title: Quiz title
        header: Header lines
        instructions: Instructions joined with newlines
        footer: Footer lines
        watermark: Watermark settings
        sections: Non-empty sections in payload order
        questions: All questions across sections, in order
    """

    success: bool
    message: str
    paper_title: str = ""
    header: tuple[str, ...] = ()
    instructions: str = ""
    footer: tuple[str, ...] = ()
    watermark: Watermark = field(default_factory=Watermark)
    sections: tuple[Section, ...] = ()
    questions: tuple[Question, ...] = ()

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def to_document_config(self, **overrides: Any) -> DocumentConfig:
        """
        DocumentConfig carrying the imported title and decorations.

        Keyword arguments override or extend the imported fields, e.g.
        `answer_key_display_mode=AnswerKeyMode.KEY_ONLY`.
        """
        values: Dict[str, Any] = {
            "paper_title": self.paper_title,
            "header": self.header,
            "instructions": self.instructions,
            "footer": self.footer,
            "watermark": self.watermark,
        }
        values.update(overrides)
        return DocumentConfig(**values)


def _failure(message: str) -> ImportResult:
    logger.warning(f"Quiz import failed: {message}")
    return ImportResult(success=False, message=message)


def _clean(value: Any, strip_line_breaks: bool) -> str:
    if not isinstance(value, str):
        return ""
    return value.replace(ESCAPED_LINE_BREAK, "") if strip_line_breaks else value


def _question_id(record: Dict[str, Any]) -> str:
    for key in ("_id", "id"):
        value = record.get(key)
        if value is not None and str(value):
            return str(value)
    return uuid.uuid4().hex


def _tags(value: Any) -> Dict[str, Any]:
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, list):
        return {"labels": list(value)}
    return {}


def map_question(
    record: Dict[str, Any],
    section_name: str,
    strip_line_breaks: bool = True,
) -> Question:
    """
    Map one backend question record to a Question.

    Options A-D are always present (possibly empty); option E only when
    its text is non-blank.

    Raises:
        ValueError: If the record cannot form a valid Question
    """
    options: List[Option] = [
        Option(
            text=_clean(record.get(f"option_{key}"), strip_line_breaks),
            image=record.get(f"option_{key}_image_url") or None,
        )
        for key in REQUIRED_OPTION_KEYS
    ]

    option_e = record.get(f"option_{OPTIONAL_OPTION_KEY}")
    if isinstance(option_e, str) and option_e.strip():
        options.append(Option(
            text=_clean(option_e, strip_line_breaks),
            image=record.get(f"option_{OPTIONAL_OPTION_KEY}_image_url") or None,
        ))

    return Question(
        id=_question_id(record),
        question_text=_clean(record.get("question_text"), strip_line_breaks),
        options=tuple(options),
        question_image=record.get("image_url") or None,
        correct_answer=record.get("correct_answer"),
        explanation=record.get("explanation") or None,
        section_name=section_name or None,
        tags=_tags(record.get("tags")),
    )


def _string_lines(value: Optional[List[Any]]) -> tuple[str, ...]:
    return tuple(str(v) for v in (value or ()))


def parse_quiz_json(json_string: str, strip_line_breaks: bool = True) -> ImportResult:
    """
    Parse a quiz JSON export.

    Args:
        json_string: Raw JSON text
        strip_line_breaks: Remove literal `\\\\` pairs from question and
            option text

    Returns:
        ImportResult; `success` is False only when the payload itself is
        unusable. A readable payload without questions is still a success.

    Example:
        >>> result = parse_quiz_json(sample_quiz_json())
        >>> result.message
        'Successfully loaded 1 questions from JSON!'
    """
    try:
        data = json.loads(json_string)
    except (json.JSONDecodeError, TypeError) as e:
        return _failure(f"Invalid JSON format: {e}")

    quiz = data.get("quiz") if isinstance(data, dict) else None
    if not quiz:
        return _failure("Invalid JSON: 'quiz' object not found")

    try:
        validate_quiz_payload(data)
    except ValidationError as e:
        return _failure(str(e))

    metadata = quiz.get("metadata") or {}
    watermark = metadata.get("watermark") or {}

    sections: List[Section] = []
    questions: List[Question] = []
    seen_ids: set[str] = set()

    for section_index, section in enumerate(quiz.get("sections") or ()):
        section_name = section.get("name") or ""
        section_questions: List[Question] = []

        for record_index, record in enumerate(section.get("questions") or ()):
            try:
                question = map_question(record, section_name, strip_line_breaks)
            except ValueError as e:
                logger.warning(
                    f"Skipping question {record_index} of section {section_index}: {e}"
                )
                continue

            if question.id in seen_ids:
                logger.warning(f"Duplicate question id in import: {question.id!r}")
            seen_ids.add(question.id)
            section_questions.append(question)

        if section_questions:
            sections.append(Section(name=section_name, questions=tuple(section_questions)))
            questions.extend(section_questions)

    if questions:
        message = f"Successfully loaded {len(questions)} questions from JSON!"
    else:
        message = "No questions found in the JSON data"

    logger.info(f"Imported {len(questions)} questions in {len(sections)} sections")

    return ImportResult(
        success=True,
        message=message,
        paper_title=quiz.get("title") or "",
        header=_string_lines(metadata.get("header")),
        instructions="\n".join(_string_lines(metadata.get("instructions"))),
        footer=_string_lines(metadata.get("footer")),
        watermark=Watermark(
            enabled=bool(watermark.get("enabled", False)),
            text=watermark.get("text") or "",
        ),
        sections=tuple(sections),
        questions=tuple(questions),
    )


def sample_quiz_json() -> str:
    """Bundled demonstration payload as a JSON string."""
    return SAMPLE_QUIZ_PATH.read_text(encoding="utf-8")
