"""
Module: builder.segmentation.classifier

Purpose:
    Best-effort detection of bare LaTeX pasted without `$` delimiters.
    When the scanner finds no math at all, the whole string is promoted
    to a single inline math segment if it carries math symbols.

Key Functions:
    - has_math_symbols(): Control sequence or one of `$ { } ^ _`
    - classify(): Promote a text-only scan to one math segment

Rules:
    - Escaped dollars (`\\$`) are literal and never count as math.
    - A double backslash is line-break syntax, not math. It is removed
      before looking for control sequences so `a\\\\b` does not read as
      the command `\\b`.

Used By:
    - builder.segmentation.scanner: scan()
"""

from __future__ import annotations

import re
from typing import Sequence

from mcq_toolkit.core.models import Segment

# Backslash + letters, not followed by another letter or a backslash
_CONTROL_SEQUENCE = re.compile(r"\\[a-zA-Z]+(?![a-zA-Z])(?!\\)")
_MATH_CHARS = re.compile(r"[${}^_]")
_ESCAPED_DOLLAR = re.compile(r"\\\$")
_LINE_BREAK = re.compile(r"\\\\")


def _strip_literal_syntax(text: str) -> str:
    # Escaped dollars first so `\\$` is read the way the scanner reads it
    candidate = _ESCAPED_DOLLAR.sub(" ", text)
    return _LINE_BREAK.sub(" ", candidate)


def has_math_symbols(text: str) -> bool:
    """True if text contains a LaTeX control sequence or a math character."""
    candidate = _strip_literal_syntax(text)
    return bool(_CONTROL_SEQUENCE.search(candidate) or _MATH_CHARS.search(candidate))


def has_only_line_breaks(text: str) -> bool:
    """True if the only LaTeX-looking syntax in text is `\\\\` line breaks."""
    return not has_math_symbols(text) and _LINE_BREAK.search(text) is not None


def classify(text: str, segments: Sequence[Segment] = ()) -> list[Segment]:
    """
    Decide whether a string without math delimiters should render as math.

    Args:
        text: The original, complete string
        segments: What the scanner produced (empty or one text segment)

    Returns:
        `[Segment.math(text)]` wrapping the entire original string if it
        looks like bare LaTeX, otherwise the scanner's segments unchanged
        (or a single text segment for an empty scan).

    Example:
        >>> classify(r"\\frac{1}{2}")
        [Segment(kind=<SegmentKind.MATH: 'math'>, content='\\\\frac{1}{2}', display_mode=False)]
    """
    if has_math_symbols(text) and not has_only_line_breaks(text):
        return [Segment.math(text, display_mode=False)]

    if not segments:
        return [Segment.text(text)]
    return list(segments)
