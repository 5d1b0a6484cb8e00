"""
Module: builder.rendering

Purpose:
    Math rendering for scanned segments: the renderer collaborator, its
    readiness gate, and the per-segment render adapter.

Key Classes:
    - MathRenderer / Latex2MathMLRenderer: External renderer interface
    - RendererGate: Bounded wait for renderer availability
    - MathRenderAdapter: Segment rendering with failure isolation

Dependencies:
    - latex2mathml: LaTeX to MathML
    - markupsafe: Escaping
"""

from .renderer import (
    MathRenderer,
    MathRenderError,
    Latex2MathMLRenderer,
    RenderOptions,
    DEFAULT_ERROR_COLOR,
)
from .readiness import RendererGate, load_default_renderer
from .adapter import MathRenderAdapter, RenderedFragment, render_text_node

__all__ = [
    "MathRenderer",
    "MathRenderError",
    "Latex2MathMLRenderer",
    "RenderOptions",
    "DEFAULT_ERROR_COLOR",
    "RendererGate",
    "load_default_renderer",
    "MathRenderAdapter",
    "RenderedFragment",
    "render_text_node",
]
