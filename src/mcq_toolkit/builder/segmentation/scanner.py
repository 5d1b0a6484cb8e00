"""
Module: builder.segmentation.scanner

Purpose:
    Split a mixed text/math string into ordered Segments with a single
    left-to-right finite-state scan.

Key Functions:
    - scan(): Main entry point

Algorithm:
    Three states: PLAIN, INLINE_MATH, DISPLAY_MATH.
    1. `\\$` is an escaped literal dollar: both characters are kept as
       content and the state does not change.
    2. An unescaped `$$` opens DISPLAY_MATH from PLAIN and closes it back
       to PLAIN, flushing the pending run.
    3. A lone unescaped `$` does the same for INLINE_MATH. Inside
       INLINE_MATH the first `$` always closes, even when a second `$`
       follows; inside DISPLAY_MATH a lone `$` is ordinary content.
    4. End of input inside math is recovered, not reported: the dangling
       delimiter plus the unconsumed content become one trailing text
       segment.
    5. A scan that found no math (zero segments or a single text segment)
       goes through the classifier unless display mode was forced or an
       unclosed delimiter was recovered.

Dependencies:
    - builder.segmentation.classifier: Bare-LaTeX heuristic

Used By:
    - builder.rendering.adapter: MathRenderAdapter
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import List

from mcq_toolkit.core.models import Segment, SegmentKind

from .classifier import classify

logger = logging.getLogger(__name__)

ESCAPED_DOLLAR = "\\$"


class ScanState(Enum):
    PLAIN = auto()
    INLINE_MATH = auto()
    DISPLAY_MATH = auto()


_OPEN_DELIMITER = {
    ScanState.INLINE_MATH: "$",
    ScanState.DISPLAY_MATH: "$$",
}


class _Scanner:
    """Single-use scan over one string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.segments: List[Segment] = []
        self.state = ScanState.PLAIN
        self.run: List[str] = []
        self.recovered = False

    def _flush_text(self) -> None:
        if self.run:
            self.segments.append(Segment.text("".join(self.run)))
        self.run = []

    def _flush_math(self, display_mode: bool) -> None:
        # Empty math (`$$$$`) is still a segment
        self.segments.append(Segment.math("".join(self.run), display_mode=display_mode))
        self.run = []

    def _enter(self, state: ScanState) -> None:
        self._flush_text()
        self.state = state

    def run_scan(self) -> List[Segment]:
        text = self.text
        n = len(text)
        i = 0

        while i < n:
            ch = text[i]

            if ch == "\\" and i + 1 < n and text[i + 1] == "$":
                self.run.append(ESCAPED_DOLLAR)
                i += 2
                continue

            if ch != "$":
                self.run.append(ch)
                i += 1
                continue

            is_pair = i + 1 < n and text[i + 1] == "$"

            if self.state is ScanState.PLAIN:
                if is_pair:
                    self._enter(ScanState.DISPLAY_MATH)
                    i += 2
                else:
                    self._enter(ScanState.INLINE_MATH)
                    i += 1
            elif self.state is ScanState.INLINE_MATH:
                self._flush_math(display_mode=False)
                self.state = ScanState.PLAIN
                i += 1
            elif is_pair:
                self._flush_math(display_mode=True)
                self.state = ScanState.PLAIN
                i += 2
            else:
                # Lone `$` inside display math
                self.run.append(ch)
                i += 1

        if self.state is not ScanState.PLAIN:
            delimiter = _OPEN_DELIMITER[self.state]
            logger.debug(f"Unclosed {delimiter!r} delimiter, keeping it as literal text")
            self.segments.append(Segment.text(delimiter + "".join(self.run)))
            self.recovered = True
            self.run = []
            self.state = ScanState.PLAIN
        else:
            self._flush_text()

        return self.segments


def scan(text: str, display_mode: bool = False) -> list[Segment]:
    """
    Partition a string into ordered text and math segments.

    Args:
        text: Raw mixed text/math string
        display_mode: True when the caller forces whole-string display
            rendering; disables the bare-LaTeX classifier

    Returns:
        Segments in scan order. Never empty for non-forced scans: an empty
        string yields a single empty text segment.

    Example:
        >>> scan("Solve $x^2 = 4$")
        [Segment(kind=<SegmentKind.TEXT: 'text'>, content='Solve ', display_mode=False),
         Segment(kind=<SegmentKind.MATH: 'math'>, content='x^2 = 4', display_mode=False)]
    """
    if not isinstance(text, str):
        raise TypeError(f"scan() expects a string, got {type(text).__name__}")

    scanner = _Scanner(text)
    segments = scanner.run_scan()

    found_no_math = len(segments) == 0 or (
        len(segments) == 1 and segments[0].kind is SegmentKind.TEXT
    )
    # Recovered delimiters stay literal text
    if found_no_math and not display_mode and not scanner.recovered:
        return classify(text, segments)

    return segments


def to_source(segments: list[Segment]) -> str:
    """Concatenate segments with their delimiters reinserted."""
    return "".join(segment.to_source() for segment in segments)
