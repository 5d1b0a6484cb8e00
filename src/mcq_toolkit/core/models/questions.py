"""
Module: questions

Purpose:
    Provides the Option and Question dataclasses - the main data structures
    handed from the data-mapping layer (manual entry or JSON import) to the
    builder. Both are immutable; the builder only derives numbering and
    rendered output from them.

Key Classes:
    - Option: One answer choice with optional image
    - Question: Mixed text/math question with 2-5 ordered options

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.sections.Section
    - builder.layout.composer: Document assembly
    - builder.output.answer_key: Correct option resolution
    - builder.loading.importer: JSON import mapping
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

MIN_OPTIONS = 2
MAX_OPTIONS = 5


@dataclass(frozen=True)
class Option:
    """
    One answer choice (immutable).

    Attributes:
        text: Mixed text/math content, may be empty
        image: Optional image URL shown under the text
    """

    text: str = ""
    image: Optional[str] = None

    def to_dict(self) -> dict:
        d: Dict[str, Any] = {"text": self.text}
        if self.image:
            d["image"] = self.image
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Option:
        return cls(text=data.get("text") or "", image=data.get("image") or None)


@dataclass(frozen=True)
class Question:
    """
    Complete multiple-choice question (immutable).

    Attributes:
        id: Opaque identifier, unique within one document and stable across edits
        question_text: Mixed text/math question body
        options: Ordered options; order defines the displayed lettering
        question_image: Optional image URL shown under the question text
        correct_answer: Exact option text or a letter 'A'..'E'
        explanation: Optional mixed text/math explanation for the answer key
        section_name: Optional name of the section this question came from
        tags: Free-form tags carried through from import

    Invariants:
        - 2 <= len(options) <= 5
        - id is a non-empty string

    Example:
        >>> q = Question(
        ...     id="q1",
        ...     question_text="Solve $x^2 - 5x + 6 = 0$",
        ...     options=(Option("$x = 2, 3$"), Option("$x = 1, 6$")),
        ...     correct_answer="A",
        ... )
        >>> q.option_count
        2
    """

    id: str
    question_text: str
    options: tuple[Option, ...]
    question_image: Optional[str] = None
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None
    section_name: Optional[str] = None
    tags: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"id must be a non-empty string: {self.id!r}")

        # Lists are accepted for convenience but stored as a tuple
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

        if not (MIN_OPTIONS <= len(self.options) <= MAX_OPTIONS):
            raise ValueError(
                f"question {self.id!r} must have {MIN_OPTIONS}-{MAX_OPTIONS} options: "
                f"got {len(self.options)}"
            )

    @property
    def option_count(self) -> int:
        return len(self.options)

    @property
    def has_explanation(self) -> bool:
        return bool(self.explanation and self.explanation.strip())

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Optional fields are omitted when empty.
        """
        d: Dict[str, Any] = {
            "id": self.id,
            "question_text": self.question_text,
            "options": [opt.to_dict() for opt in self.options],
        }
        if self.question_image:
            d["question_image"] = self.question_image
        if self.correct_answer is not None:
            d["correct_answer"] = self.correct_answer
        if self.explanation:
            d["explanation"] = self.explanation
        if self.section_name:
            d["section_name"] = self.section_name
        if self.tags:
            d["tags"] = dict(self.tags)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        return cls(
            id=str(data["id"]),
            question_text=data.get("question_text") or "",
            options=tuple(Option.from_dict(o) for o in data.get("options", [])),
            question_image=data.get("question_image") or None,
            correct_answer=data.get("correct_answer"),
            explanation=data.get("explanation") or None,
            section_name=data.get("section_name") or None,
            tags=dict(data.get("tags") or {}),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.id!r}, options={self.option_count}, "
            f"answer={self.correct_answer!r})"
        )
