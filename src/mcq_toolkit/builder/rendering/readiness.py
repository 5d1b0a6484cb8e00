"""
Module: builder.rendering.readiness

Purpose:
    One-time readiness gate in front of the math renderer. The renderer is
    loaded on a background thread; callers wait for it with a bounded
    timeout and fall back to plain-text rendering if it never arrives.

Key Classes:
    - RendererGate: Holds the renderer once loaded

Key Functions:
    - load_default_renderer(): Build and warm up the latex2mathml renderer

Dependencies:
    - threading (std)
    - builder.rendering.renderer: MathRenderer, Latex2MathMLRenderer

Used By:
    - builder.controller: build_paper()
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from .renderer import Latex2MathMLRenderer, MathRenderer, RenderOptions

logger = logging.getLogger(__name__)

DEFAULT_READY_TIMEOUT_S = 5.0
DEFAULT_POLL_INTERVAL_S = 0.05


def load_default_renderer() -> MathRenderer:
    """Create the latex2mathml renderer and render once to prove it works."""
    renderer = Latex2MathMLRenderer()
    renderer.render_to_string("x", RenderOptions(throw_on_error=True))
    return renderer


class RendererGate:
    """
    Readiness gate for a lazily loaded renderer.

    The loader runs at most once. A loader that raises leaves the gate
    permanently not-ready; `wait()` then returns None immediately.

    Example:
        >>> gate = RendererGate()
        >>> renderer = gate.wait(timeout=2.0)
        >>> renderer is None  # only if latex2mathml failed to load
        False
    """

    def __init__(
        self,
        loader: Callable[[], MathRenderer] = load_default_renderer,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL_S,
    ) -> None:
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive: {poll_interval}")
        self._loader = loader
        self._poll_interval = poll_interval
        self._renderer: Optional[MathRenderer] = None
        self._load_error: Optional[str] = None
        self._done = threading.Event()
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def for_renderer(cls, renderer: MathRenderer) -> RendererGate:
        """Gate that is ready immediately with an existing renderer."""
        gate = cls(loader=lambda: renderer)
        gate._renderer = renderer
        gate._done.set()
        return gate

    def _load(self) -> None:
        try:
            self._renderer = self._loader()
            logger.debug(f"Math renderer ready: {type(self._renderer).__name__}")
        except Exception as e:
            self._load_error = f"{type(e).__name__}: {e}"
            logger.warning(f"Math renderer failed to load: {self._load_error}")
        finally:
            self._done.set()

    def start(self) -> None:
        """Begin loading in the background (idempotent)."""
        with self._lock:
            if self._thread is not None or self._done.is_set():
                return
            self._thread = threading.Thread(
                target=self._load, name="math-renderer-loader", daemon=True
            )
            self._thread.start()

    def ready(self) -> bool:
        return self._done.is_set() and self._renderer is not None

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def wait(self, timeout: float = DEFAULT_READY_TIMEOUT_S) -> Optional[MathRenderer]:
        """
        Wait for the renderer, polling until ready, failed, or timed out.

        Args:
            timeout: Maximum seconds to wait

        Returns:
            The renderer, or None if it is not available within timeout
        """
        self.start()
        deadline = time.monotonic() + max(0.0, timeout)

        while not self._done.is_set():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.warning(
                    f"Math renderer not ready after {timeout:.2f}s, "
                    "falling back to plain-text rendering"
                )
                return None
            self._done.wait(min(self._poll_interval, remaining))

        return self._renderer
