"""
Module: builder.rendering.renderer

Purpose:
    Narrow interface to the external math-typesetting engine plus the
    default implementation backed by latex2mathml (LaTeX -> MathML).

Key Classes:
    - RenderOptions: Per-call rendering options
    - MathRenderer: Protocol every renderer satisfies
    - Latex2MathMLRenderer: latex2mathml-backed renderer
    - MathRenderError: Raised when throw_on_error is set and rendering fails

Dependencies:
    - latex2mathml: LaTeX to MathML conversion
    - markupsafe: Escaping source text inside error markup

Used By:
    - builder.rendering.readiness: RendererGate
    - builder.rendering.adapter: MathRenderAdapter
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from latex2mathml.converter import convert as latex_to_mathml
from markupsafe import escape

logger = logging.getLogger(__name__)

DEFAULT_ERROR_COLOR = "#f44336"


class MathRenderError(Exception):
    """Rendering a formula failed."""

    def __init__(self, message: str, latex: str = ""):
        super().__init__(message)
        self.latex = latex


@dataclass(frozen=True)
class RenderOptions:
    """
    Options handed to the renderer for every formula.

    Attributes:
        display_mode: Render as a centered block instead of inline
        error_color: CSS color used for inline error reports
        trust: Allow commands that are unsafe with untrusted input
        strict: Strictness for non-standard input ("ignore", "warn", "error")
        throw_on_error: Raise MathRenderError instead of reporting inline
    """

    display_mode: bool = False
    error_color: str = DEFAULT_ERROR_COLOR
    trust: bool = True
    strict: str = "ignore"
    throw_on_error: bool = False

    def __post_init__(self) -> None:
        if self.strict not in ("ignore", "warn", "error"):
            raise ValueError(f"strict must be 'ignore', 'warn' or 'error': {self.strict!r}")


@runtime_checkable
class MathRenderer(Protocol):
    """Anything that turns LaTeX source into markup."""

    def render_to_string(self, latex: str, options: RenderOptions) -> str:
        """
        Render one formula.

        Raises:
            MathRenderError: Only when options.throw_on_error is True
        """
        ...


def error_markup(latex: str, message: str, error_color: str = DEFAULT_ERROR_COLOR) -> str:
    """Visible inline error report that keeps the author's source readable."""
    return (
        f'<span class="math-error" style="color: {escape(error_color)};" '
        f'title="{escape(message)}">{escape(latex)}</span>'
    )


class Latex2MathMLRenderer:
    """
    MathML renderer backed by latex2mathml.

    latex2mathml has no trust or strictness switches, so those options are
    accepted and ignored.

    Example:
        >>> renderer = Latex2MathMLRenderer()
        >>> renderer.render_to_string("x^2", RenderOptions())
        '<math xmlns="http://www.w3.org/1998/Math/MathML" display="inline">...'
    """

    def render_to_string(self, latex: str, options: RenderOptions) -> str:
        display = "block" if options.display_mode else "inline"
        try:
            return latex_to_mathml(latex, display=display)
        except Exception as e:
            # latex2mathml raises plain Exception subclasses for malformed input
            message = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
            if options.throw_on_error:
                raise MathRenderError(message, latex=latex) from e
            logger.debug(f"Inline error report for {latex!r}: {message}")
            return error_markup(latex, message, options.error_color)
