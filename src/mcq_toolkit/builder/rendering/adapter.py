"""
Module: builder.rendering.adapter

Purpose:
    Render scanned segments to markup through the math renderer, isolating
    failures to the segment that caused them.

Key Classes:
    - RenderedFragment: Markup plus the errors met while producing it
    - MathRenderAdapter: Segment and placeholder rendering

Rules:
    - Text segments are never handed to the renderer. They are escaped,
      every `\\\\` becomes `<br/>`, and the result is wrapped as a text node.
    - A math segment that fails renders as a visible error fragment with
      its source; the remaining segments are still rendered.
    - Forced display mode renders the whole normalized string in one call;
      failure there is reported as `RenderedFragment.error`, never raised.
    - Without a renderer (not ready in time) every segment is rendered as
      escaped plain text.

Dependencies:
    - markupsafe: HTML escaping of text nodes
    - builder.segmentation: scan(), normalize_tabular()

Used By:
    - builder.controller: build_paper()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence

from markupsafe import escape

from mcq_toolkit.core.models import Segment
from mcq_toolkit.builder.segmentation.scanner import scan
from mcq_toolkit.builder.segmentation.tabular import normalize_tabular
from mcq_toolkit.builder.layout.models import Placeholder

from .renderer import MathRenderer, RenderOptions, error_markup

logger = logging.getLogger(__name__)

LINE_BREAK_SOURCE = "\\\\"
LINE_BREAK_MARKUP = "<br/>"


@dataclass(frozen=True)
class RenderedFragment:
    """
    Rendered markup for one string.

    Attributes:
        markup: Markup ready to drop into the print surface
        errors: Per-segment failure messages (segments were still emitted)
        error: Document-level failure of a forced display render
        degraded: True if rendered without a math renderer
    """

    markup: str
    errors: tuple[str, ...] = ()
    error: Optional[str] = None
    degraded: bool = False

    @property
    def ok(self) -> bool:
        return not self.errors and self.error is None


def render_text_node(content: str) -> str:
    """Escape plain text and turn `\\\\` line breaks into `<br/>`."""
    escaped = str(escape(content))
    return f'<span class="plain-text">{escaped.replace(LINE_BREAK_SOURCE, LINE_BREAK_MARKUP)}</span>'


def render_fallback_node(segment: Segment) -> str:
    """Plain-text stand-in for a math segment when no renderer is available."""
    return f'<span class="math-fallback">{escape(segment.to_source())}</span>'


class MathRenderAdapter:
    """
    Wraps a MathRenderer with per-segment error isolation.

    Args:
        renderer: Ready renderer, or None for degraded plain-text output
        options: Base options; display_mode is set per segment

    Example:
        >>> adapter = MathRenderAdapter(Latex2MathMLRenderer())
        >>> fragment = adapter.render_text("Area is $\\pi r^2$")
        >>> fragment.ok
        True
    """

    def __init__(
        self,
        renderer: Optional[MathRenderer],
        options: Optional[RenderOptions] = None,
    ) -> None:
        self.renderer = renderer
        self.options = options or RenderOptions()

    @property
    def degraded(self) -> bool:
        return self.renderer is None

    def _render_math(self, segment: Segment, options: RenderOptions) -> tuple[str, Optional[str]]:
        """Render one math segment; returns (markup, error message or None)."""
        call_options = replace(options, display_mode=segment.display_mode, throw_on_error=True)
        try:
            return self.renderer.render_to_string(segment.content, call_options), None
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.warning(f"Math segment failed to render ({message}): {segment.content!r}")
            return error_markup(segment.to_source(), message, options.error_color), message

    def render_segments(
        self,
        segments: Sequence[Segment],
        options: Optional[RenderOptions] = None,
    ) -> RenderedFragment:
        """
        Render segments in order, one markup string for all of them.

        Args:
            segments: Output of scan()
            options: Overrides the adapter's base options

        Returns:
            RenderedFragment with any per-segment errors listed
        """
        options = options or self.options
        parts: List[str] = []
        errors: List[str] = []

        for segment in segments:
            if not segment.is_math:
                parts.append(render_text_node(segment.content))
            elif self.renderer is None:
                parts.append(render_fallback_node(segment))
            else:
                markup, error = self._render_math(segment, options)
                parts.append(markup)
                if error:
                    errors.append(error)

        return RenderedFragment(
            markup="".join(parts),
            errors=tuple(errors),
            degraded=self.renderer is None,
        )

    def render_text(self, text: str, display_mode: bool = False) -> RenderedFragment:
        """
        Normalize, segment and render one mixed text/math string.

        Args:
            text: Raw question/option/explanation text
            display_mode: Render the whole string as one display formula

        Returns:
            RenderedFragment; never raises for malformed math
        """
        if not isinstance(text, str):
            return RenderedFragment(markup="")

        normalized = normalize_tabular(text)

        if not display_mode:
            return self.render_segments(scan(normalized))

        if self.renderer is None:
            return RenderedFragment(
                markup=render_fallback_node(Segment.math(normalized, display_mode=True)),
                degraded=True,
            )

        options = replace(self.options, display_mode=True, throw_on_error=True)
        try:
            return RenderedFragment(markup=self.renderer.render_to_string(normalized, options))
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.warning(f"Display formula failed to render: {message}")
            return RenderedFragment(markup="", error=message)

    def render_placeholders(self, placeholders: Iterable[Placeholder]) -> Dict[str, RenderedFragment]:
        """
        Render every placeholder of an assembled document.

        Returns:
            Mapping of placeholder id to its rendered fragment
        """
        fragments: Dict[str, RenderedFragment] = {}
        failed = 0
        for placeholder in placeholders:
            fragment = self.render_text(placeholder.source)
            if not fragment.ok:
                failed += 1
            fragments[placeholder.id] = fragment

        logger.info(
            f"Rendered {len(fragments)} placeholders"
            + (f" ({failed} with math errors)" if failed else "")
            + (" in plain-text fallback mode" if self.degraded else "")
        )
        return fragments
