"""
Module: builder.output

Purpose:
    Output generation for question papers: the answer key block and the
    printable HTML document.

Key Functions:
    - build_answer_key(): Answer key block from stored answers
    - render_html(): Printable HTML for an assembled document
"""

from .answer_key import build_answer_key, resolve_correct_index, UNRESOLVED_LABEL
from .html import block_classes, fill_placeholder, render_html

__all__ = [
    "build_answer_key",
    "resolve_correct_index",
    "UNRESOLVED_LABEL",
    "render_html",
    "fill_placeholder",
    "block_classes",
]
