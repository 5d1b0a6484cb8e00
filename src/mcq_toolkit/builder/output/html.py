"""
Module: builder.output.html

Purpose:
    Emit the printable HTML document for an assembled paper.
    The structured document decides what goes where; this module only
    turns its blocks and layout hints into markup and CSS.

Key Functions:
    - render_html(): Complete HTML document as a string
    - fill_placeholder(): Markup for one placeholder slot
    - block_classes(): CSS classes for a block and its layout hints

Rules:
    - Config strings and plain text are always escaped (Jinja2 autoescape).
    - Only rendered fragments are inserted as-is.
    - A placeholder without a fragment falls back to its escaped source.
    - Every placeholder is an element whose id is the placeholder id, so
      the print surface can re-fill it in place.

Dependencies:
    - jinja2: Template rendering
    - markupsafe: Markup / escape

Used By:
    - builder.controller: build_paper()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup, escape

from mcq_toolkit.builder.config import AnswerKeyMode
from mcq_toolkit.builder.layout.config import PrintLayoutConfig
from mcq_toolkit.builder.layout.models import LayoutHints, Placeholder, StructuredDocument

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
PAPER_TEMPLATE = "paper.html.j2"

_ENV: Optional[Environment] = None

# LayoutHints field -> CSS class defined in the template
_HINT_CLASSES = (
    ("avoid_break_inside", "keep-together"),
    ("page_break_before", "new-page"),
    ("span_all_columns", "full-width"),
)


def _environment() -> Environment:
    global _ENV
    if _ENV is None:
        _ENV = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
    return _ENV


def fill_placeholder(placeholder: Placeholder, fragments: Mapping[str, Any]) -> Markup:
    """
    Markup for one placeholder.

    Args:
        placeholder: Slot to fill
        fragments: Placeholder id -> rendered fragment (object with
            `.markup`) or markup string

    Returns:
        Rendered markup, or the escaped source when nothing was rendered
    """
    fragment = fragments.get(placeholder.id)
    if fragment is None:
        return escape(placeholder.source)
    markup = fragment if isinstance(fragment, str) else fragment.markup
    return Markup(markup)


def block_classes(base: str, hints: LayoutHints) -> str:
    """Class attribute value for a block, e.g. "question keep-together"."""
    classes = [base]
    classes.extend(css for field_name, css in _HINT_CLASSES if getattr(hints, field_name))
    return " ".join(classes)


def render_html(
    document: StructuredDocument,
    fragments: Mapping[str, Any],
    layout: Optional[PrintLayoutConfig] = None,
) -> str:
    """
    Render the complete printable HTML document.

    Args:
        document: Assembled document
        fragments: Rendered fragments keyed by placeholder id
        layout: Print layout settings (defaults to two columns)

    Returns:
        HTML document as a string

    Example:
        >>> html = render_html(document, adapter.render_placeholders(document.placeholders))
        >>> 'id="q-q1-question-text"' in html
        True
    """
    layout = layout or PrintLayoutConfig()
    template = _environment().get_template(PAPER_TEMPLATE)

    missing = [p.id for p in document.placeholders if p.id not in fragments]
    if missing:
        logger.debug(f"{len(missing)} placeholders have no fragment, using escaped source")

    html = template.render(
        document=document,
        layout=layout,
        style=document.style,
        key_only=(
            document.answer_key is not None
            and document.answer_key.mode is AnswerKeyMode.KEY_ONLY
        ),
        fill=lambda placeholder: fill_placeholder(placeholder, fragments),
        classes=block_classes,
    )
    logger.debug(f"Rendered HTML for {document.question_count} questions ({len(html)} chars)")
    return html
