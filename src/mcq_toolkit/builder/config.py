"""
Module: builder.config

Purpose:
    Configuration dataclasses for building a question paper. Immutable
    configuration with validation on construction.

Key Classes:
    - DocumentConfig: Paper title, decorations, styling, numbering, answer key
    - Watermark: Optional diagonal watermark text
    - AnswerKeyMode: NONE / KEY_ONLY / KEY_AND_EXPLANATION
    - FontWeight: normal / bold

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.layout.composer: Document assembly
    - builder.output.answer_key: Answer key building
    - builder.controller: Main build controller
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

# Tokens accepted for option numbering, in the order the settings form lists them
OPTION_NUMBERING_STYLES: tuple[str, ...] = ("A)", "(A)", "a)", "(a)", "1)", "(1)")
DEFAULT_OPTION_NUMBERING_STYLE = "A)"

DEFAULT_FONT_SIZE = 12
DEFAULT_FONT_COLOR = "#000000"

_COLOR_PATTERN = re.compile(r"^(#[0-9a-fA-F]{3}|#[0-9a-fA-F]{6}|[a-zA-Z]+)$")


class AnswerKeyMode(Enum):
    """
    Controls whether and how the answer key is appended.

    Attributes:
        NONE: No answer key block
        KEY_ONLY: Compact grid of "<number>. <label>" entries
        KEY_AND_EXPLANATION: One block per question with label and explanation
    """

    NONE = "NONE"
    KEY_ONLY = "KEY_ONLY"
    KEY_AND_EXPLANATION = "KEY_AND_EXPLANATION"


class FontWeight(Enum):
    NORMAL = "normal"
    BOLD = "bold"


@dataclass(frozen=True)
class Watermark:
    """
    Watermark decoration applied to every printed page.

    Attributes:
        enabled: Whether the watermark is drawn
        text: Watermark text
    """

    enabled: bool = False
    text: str = ""

    @property
    def is_visible(self) -> bool:
        """Enabled and has something to show."""
        return self.enabled and bool(self.text.strip())

    def to_dict(self) -> dict:
        return {"enabled": self.enabled, "text": self.text}

    @classmethod
    def from_dict(cls, data: dict | None) -> Watermark:
        if not data:
            return cls()
        return cls(enabled=bool(data.get("enabled", False)), text=data.get("text") or "")


@dataclass(frozen=True)
class DocumentConfig:
    """
    Configuration for assembling a question paper (immutable).

    Attributes:
        paper_title: Title shown in the header block
        instructions: Instructions text (newlines preserved)
        header: Header lines under the title
        footer: Footer lines repeated on every page
        watermark: Watermark decoration
        font_size: Base font size in px
        font_weight: Base font weight
        font_color: CSS color for body text
        option_numbering_style: One of OPTION_NUMBERING_STYLES
        answer_key_display_mode: Answer key mode

    Example:
        >>> config = DocumentConfig(
        ...     paper_title="Human Reproduction DPP-2",
        ...     option_numbering_style="(a)",
        ...     answer_key_display_mode=AnswerKeyMode.KEY_ONLY,
        ... )
    """

    paper_title: str = ""
    instructions: str = ""
    header: tuple[str, ...] = ()
    footer: tuple[str, ...] = ()
    watermark: Watermark = field(default_factory=Watermark)

    # Styling
    font_size: int = DEFAULT_FONT_SIZE
    font_weight: FontWeight = FontWeight.NORMAL
    font_color: str = DEFAULT_FONT_COLOR

    # Numbering and answer key
    option_numbering_style: str = DEFAULT_OPTION_NUMBERING_STYLE
    answer_key_display_mode: AnswerKeyMode = AnswerKeyMode.NONE

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # Sequences are accepted as lists but stored as tuples
        if not isinstance(self.header, tuple):
            object.__setattr__(self, "header", tuple(self.header))
        if not isinstance(self.footer, tuple):
            object.__setattr__(self, "footer", tuple(self.footer))

        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive: {self.font_size}")
        if not _COLOR_PATTERN.match(self.font_color or ""):
            raise ValueError(f"font_color must be a hex or named color: {self.font_color!r}")
        if self.option_numbering_style not in OPTION_NUMBERING_STYLES:
            raise ValueError(
                f"option_numbering_style must be one of {OPTION_NUMBERING_STYLES}: "
                f"{self.option_numbering_style!r}"
            )
        if not isinstance(self.answer_key_display_mode, AnswerKeyMode):
            raise ValueError(
                f"answer_key_display_mode must be an AnswerKeyMode: "
                f"{self.answer_key_display_mode!r}"
            )
        if not isinstance(self.font_weight, FontWeight):
            raise ValueError(f"font_weight must be a FontWeight: {self.font_weight!r}")

    @property
    def header_lines(self) -> tuple[str, ...]:
        """Header lines with blank entries dropped."""
        return tuple(h for h in self.header if h and h.strip())

    @property
    def footer_lines(self) -> tuple[str, ...]:
        """Footer lines with blank entries dropped."""
        return tuple(f for f in self.footer if f and f.strip())

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "paper_title": self.paper_title,
            "instructions": self.instructions,
            "header": list(self.header),
            "footer": list(self.footer),
            "watermark": self.watermark.to_dict(),
            "font_size": self.font_size,
            "font_weight": self.font_weight.value,
            "font_color": self.font_color,
            "option_numbering_style": self.option_numbering_style,
            "answer_key_display_mode": self.answer_key_display_mode.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> DocumentConfig:
        """
        Deserialize from dictionary.

        Missing keys fall back to defaults; invalid values raise ValueError.
        """
        return cls(
            paper_title=data.get("paper_title") or "",
            instructions=data.get("instructions") or "",
            header=tuple(data.get("header") or ()),
            footer=tuple(data.get("footer") or ()),
            watermark=Watermark.from_dict(data.get("watermark")),
            font_size=int(data.get("font_size", DEFAULT_FONT_SIZE)),
            font_weight=FontWeight(data.get("font_weight", FontWeight.NORMAL.value)),
            font_color=data.get("font_color") or DEFAULT_FONT_COLOR,
            option_numbering_style=data.get(
                "option_numbering_style", DEFAULT_OPTION_NUMBERING_STYLE
            ),
            answer_key_display_mode=AnswerKeyMode(
                data.get("answer_key_display_mode", AnswerKeyMode.NONE.value)
            ),
        )
