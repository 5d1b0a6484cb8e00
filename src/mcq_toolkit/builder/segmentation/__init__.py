"""
Module: builder.segmentation

Purpose:
    Turn raw question/option strings into ordered text and math segments.

Key Functions:
    - scan(): Delimiter scanner (with the bare-LaTeX classifier)
    - classify(): Whole-string math heuristic
    - normalize_tabular(): tabular -> array rewrite

Used By:
    - builder.rendering.adapter: MathRenderAdapter
"""

from .classifier import classify, has_math_symbols
from .scanner import scan, to_source, ScanState
from .tabular import normalize_tabular, normalize_cell

__all__ = [
    "scan",
    "to_source",
    "ScanState",
    "classify",
    "has_math_symbols",
    "normalize_tabular",
    "normalize_cell",
]
