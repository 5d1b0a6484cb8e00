"""
Module: builder.controller

Purpose:
    Orchestrate the complete paper building pipeline.
    Assemble → Wait for renderer → Render placeholders → Emit HTML → Write

Key Functions:
    - build_paper(): Main entry point for building a paper

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.layout: Document assembly
    - builder.rendering: Renderer readiness and math rendering
    - builder.output: HTML emission

Used By:
    - Callers rendering papers from imported or hand-built questions
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from mcq_toolkit.core.models import Question, Section
from mcq_toolkit.core.models.sections import sections_from_questions

from .config import DocumentConfig
from .layout import assemble, AssemblyError, PrintLayoutConfig, StructuredDocument
from .rendering import MathRenderAdapter, MathRenderer, RenderedFragment, RendererGate, RenderOptions
from .rendering.readiness import DEFAULT_READY_TIMEOUT_S
from .output import render_html

logger = logging.getLogger(__name__)

_DEFAULT_GATE: Optional[RendererGate] = None
_DEFAULT_GATE_LOCK = threading.Lock()


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        document: Assembled structured document
        fragments: Rendered fragment per placeholder id
        html: Printable HTML document
        errors: Math render errors as "<placeholder id>: <message>"
        warnings: Recoverable problems (fallback rendering, unresolved answers)
        output_path: Where the HTML was written, if requested

    Example:
        >>> result = build_paper(config, sections)
        >>> print(f"{result.document.question_count} questions, {len(result.errors)} math errors")
    """

    document: StructuredDocument
    fragments: Dict[str, RenderedFragment]
    html: str
    errors: tuple[str, ...]
    warnings: tuple[str, ...]
    output_path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return not self.errors


def default_gate() -> RendererGate:
    """Process-wide gate for the latex2mathml renderer, started on first use."""
    global _DEFAULT_GATE
    with _DEFAULT_GATE_LOCK:
        if _DEFAULT_GATE is None:
            _DEFAULT_GATE = RendererGate()
            _DEFAULT_GATE.start()
        return _DEFAULT_GATE


def _resolve_renderer(
    renderer: Union[MathRenderer, RendererGate, None],
    timeout: float,
) -> Optional[MathRenderer]:
    gate = renderer if isinstance(renderer, RendererGate) else None
    if renderer is None:
        gate = default_gate()
    if gate is None:
        return renderer
    return gate.wait(timeout=timeout)


def _as_sections(items: Sequence[Union[Section, Question]]) -> List[Section]:
    items = list(items)
    if items and all(isinstance(item, Question) for item in items):
        return sections_from_questions(items)
    return items


def build_paper(
    config: DocumentConfig,
    sections: Sequence[Union[Section, Question]],
    *,
    renderer: Union[MathRenderer, RendererGate, None] = None,
    layout: Optional[PrintLayoutConfig] = None,
    output_path: Optional[Path] = None,
    readiness_timeout: float = DEFAULT_READY_TIMEOUT_S,
    render_options: Optional[RenderOptions] = None,
) -> BuildResult:
    """
    Build a paper from start to finish.

    Pipeline:
    1. Assemble the structured document
    2. Wait (bounded) for the math renderer
    3. Render every placeholder
    4. Emit the printable HTML
    5. (Optional) Write it to output_path

    Args:
        config: Document configuration
        sections: Sections in order, or a flat question list
        renderer: Ready renderer, a RendererGate, or None for the shared
            latex2mathml gate
        layout: Print layout settings
        output_path: HTML file to write (parents are created)
        readiness_timeout: Seconds to wait for the renderer
        render_options: Base renderer options

    Returns:
        BuildResult with document, fragments and HTML

    Raises:
        BuildError: If the document cannot be assembled

    Example:
        >>> result = build_paper(config, sections, output_path=Path("out/paper.html"))
        >>> result.output_path.exists()
        True
    """
    start_time = time.perf_counter()
    warnings: List[str] = []

    try:
        document = assemble(config, _as_sections(sections))
    except AssemblyError as e:
        logger.error(f"Cannot build paper: {e}")
        raise BuildError(f"Failed to assemble paper: {e}") from e

    math_renderer = _resolve_renderer(renderer, readiness_timeout)
    if math_renderer is None:
        warnings.append("Math renderer unavailable; math is shown as plain text")

    adapter = MathRenderAdapter(math_renderer, render_options)
    fragments = adapter.render_placeholders(document.placeholders)

    errors = [
        f"{placeholder_id}: {message}"
        for placeholder_id, fragment in fragments.items()
        for message in (fragment.errors + ((fragment.error,) if fragment.error else ()))
    ]

    if document.answer_key is not None:
        for entry in document.answer_key.unresolved:
            warnings.append(f"Question {entry.number}: correct answer could not be resolved")

    html = render_html(document, fragments, layout)

    written: Optional[Path] = None
    if output_path is not None:
        written = Path(output_path)
        written.parent.mkdir(parents=True, exist_ok=True)
        written.write_text(html, encoding="utf-8")
        logger.info(f"Wrote paper HTML: {written}")

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Built paper with {document.question_count} questions in {elapsed:.2f}s "
        f"({len(errors)} math errors, {len(warnings)} warnings)"
    )

    return BuildResult(
        document=document,
        fragments=fragments,
        html=html,
        errors=tuple(errors),
        warnings=tuple(warnings),
        output_path=written,
    )
