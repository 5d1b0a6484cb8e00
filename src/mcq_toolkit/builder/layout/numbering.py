"""
Module: builder.layout.numbering

Purpose:
    Option label derivation and stable placeholder identifiers.

Key Classes:
    - AlphabetCase: UPPER / LOWER / NUMERIC
    - OptionLabelStyle: Parsed numbering style token

Key Functions:
    - option_label(): Label for an option index under a style token
    - letter_to_index(): 'A' -> 0, 'b' -> 1, ...
    - placeholder_id(): Identifier for (question id, role)

Used By:
    - builder.layout.composer: Option labels, placeholders
    - builder.output.answer_key: Answer labels, explanation placeholders
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional

QUESTION_TEXT_ROLE = "question-text"
EXPLANATION_ROLE = "explanation"

# "_" is the escape marker, so it is escaped too
_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9-]")


class AlphabetCase(Enum):
    UPPER = "upper"
    LOWER = "lower"
    NUMERIC = "numeric"


@dataclass(frozen=True)
class OptionLabelStyle:
    """
    Parsed option numbering style.

    Attributes:
        wrap_in_parens: Label is "(X)"
        alphabet_case: Letters A.., a.., or numbers 1..
        suffix: Characters after the marker when not wrapped, e.g. ")"

    Example:
        >>> style = OptionLabelStyle.parse("(a)")
        >>> style.label(2)
        '(c)'
        >>> OptionLabelStyle.parse("1)").label(0)
        '1)'
    """

    wrap_in_parens: bool
    alphabet_case: AlphabetCase
    suffix: str

    @classmethod
    def parse(cls, token: str) -> OptionLabelStyle:
        if not token:
            raise ValueError("numbering style token must not be empty")

        if "1" in token:
            case = AlphabetCase.NUMERIC
        elif "a" in token:
            case = AlphabetCase.LOWER
        else:
            case = AlphabetCase.UPPER

        return cls(
            wrap_in_parens=token.startswith("("),
            alphabet_case=case,
            suffix=re.sub(r"[A-Za-z0-9]", "", token),
        )

    def marker(self, index: int) -> str:
        """Letter or number for a 0-based option index."""
        if index < 0:
            raise ValueError(f"option index must be non-negative: {index}")
        if self.alphabet_case is AlphabetCase.NUMERIC:
            return str(index + 1)
        base = "a" if self.alphabet_case is AlphabetCase.LOWER else "A"
        return chr(ord(base) + index)

    def label(self, index: int) -> str:
        marker = self.marker(index)
        if self.wrap_in_parens:
            return f"({marker})"
        return f"{marker}{self.suffix}"


@lru_cache(maxsize=32)
def parse_style(token: str) -> OptionLabelStyle:
    return OptionLabelStyle.parse(token)


def option_label(index: int, style_token: str) -> str:
    """Label for a 0-based option index, e.g. option_label(1, "A)") == "B)"."""
    return parse_style(style_token).label(index)


def letter_to_index(letter: str) -> Optional[int]:
    """
    Map a single answer letter to a 0-based index.

    Whitespace is ignored and case does not matter. Anything that is not a
    single ASCII letter gives None.
    """
    if not isinstance(letter, str):
        return None
    letter = letter.strip().upper()
    if len(letter) != 1 or not ("A" <= letter <= "Z"):
        return None
    return ord(letter) - ord("A")


def option_role(index: int) -> str:
    return f"option-{index}"


def sanitize_id(question_id: str) -> str:
    """
    Make an opaque question id safe for use inside a markup id.

    Each character outside [A-Za-z0-9-] becomes "_<hex code point>_". The
    mapping is reversible, so distinct ids never share a token.
    """
    return _UNSAFE_ID_CHARS.sub(lambda m: f"_{ord(m.group(0)):x}_", str(question_id))


def placeholder_id(question_id: str, role: str) -> str:
    """
    Stable identifier for one piece of a question.

    Example:
        >>> placeholder_id("sample 1", option_role(2))
        'q-sample_20_1-option-2'
    """
    return f"q-{sanitize_id(question_id)}-{role}"
