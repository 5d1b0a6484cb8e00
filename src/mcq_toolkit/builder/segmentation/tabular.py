"""
Module: builder.segmentation.tabular

Purpose:
    Rewrite `tabular` environments into `array` environments, which the
    math renderer understands. Everything outside matched blocks is left
    byte-for-byte unchanged.

Key Functions:
    - normalize_tabular(): Rewrite every tabular block in a string
    - normalize_cell(): Rewrite a single table cell

Cell rules (applied to the trimmed cell):
    1. Fully wrapped in `$...$`  -> delimiters stripped
    2. Contains `$` otherwise    -> every `$...$` pair unwrapped in place
    3. Non-empty, not a control sequence -> wrapped in `\\text{...}`
    4. Empty or starts with `\\` -> left as-is
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Column spec may contain one level of nested braces, e.g. {|p{2cm}|c|}
_TABULAR_BLOCK = re.compile(
    r"\\begin\{tabular\}(\{(?:[^{}]|\{[^{}]*\})*\})(.*?)\\end\{tabular\}",
    re.DOTALL,
)
_ROW_SEPARATOR = re.compile(r"\\\\\s*")
_WRAPPED_MATH = re.compile(r"\$([^$]*)\$", re.DOTALL)
_INNER_MATH = re.compile(r"\$(.*?)\$", re.DOTALL)

HLINE = "\\hline"
CELL_SEPARATOR = " & "
ROW_SEPARATOR = " \\\\ "


def normalize_cell(cell: str) -> str:
    """
    Rewrite one table cell so it typesets correctly inside `array`.

    Example:
        >>> normalize_cell(" $x$ ")
        'x'
        >>> normalize_cell("Label")
        '\\\\text{Label}'
    """
    cell = cell.strip()

    wrapped = _WRAPPED_MATH.fullmatch(cell)
    if wrapped:
        return wrapped.group(1)
    if "$" in cell:
        return _INNER_MATH.sub(r"\1", cell)
    if cell and not cell.startswith("\\"):
        return f"\\text{{{cell}}}"
    return cell


def _normalize_row(row: str) -> str:
    if row.strip() == HLINE:
        return HLINE
    return CELL_SEPARATOR.join(normalize_cell(cell) for cell in row.split("&"))


def _convert_block(match: re.Match) -> str:
    column_spec, content = match.group(1), match.group(2)

    rows = [row for row in _ROW_SEPARATOR.split(content.strip()) if row.strip()]
    body = ROW_SEPARATOR.join(_normalize_row(row) for row in rows)

    logger.debug(f"Converted tabular{column_spec} with {len(rows)} rows to array")
    return f"\\begin{{array}}{column_spec}{body}\\end{{array}}"


def normalize_tabular(text: str) -> str:
    """
    Replace every `\\begin{tabular}{spec}...\\end{tabular}` with an
    equivalent `\\begin{array}{spec}...\\end{array}`.

    Args:
        text: Any string; non-strings are returned as ''

    Returns:
        Text with tabular blocks rewritten
    """
    if not isinstance(text, str):
        return ""
    if "\\begin{tabular}" not in text:
        return text
    return _TABULAR_BLOCK.sub(_convert_block, text)
