"""
Tests for builder.rendering.readiness

Test Coverage:
- Immediate readiness for injected renderers
- Bounded wait with plain-text fallback
- Loader failures
- One-time loading
"""

import logging
import threading

import pytest

from mcq_toolkit.builder.rendering.readiness import RendererGate


class TestRendererGate:
    """Tests for RendererGate."""

    def test_for_renderer_when_created_then_ready_immediately(self, fake_renderer):
        gate = RendererGate.for_renderer(fake_renderer)
        assert gate.ready()
        assert gate.wait(timeout=0) is fake_renderer

    def test_wait_when_loader_succeeds_then_returns_renderer(self, fake_renderer):
        gate = RendererGate(loader=lambda: fake_renderer, poll_interval=0.01)
        assert gate.wait(timeout=2.0) is fake_renderer
        assert gate.ready()

    def test_wait_when_loader_slow_then_none_after_timeout(self, fake_renderer, caplog):
        release = threading.Event()

        def slow_loader():
            release.wait(5.0)
            return fake_renderer

        gate = RendererGate(loader=slow_loader, poll_interval=0.01)
        with caplog.at_level(logging.WARNING):
            assert gate.wait(timeout=0.05) is None
        assert "not ready" in caplog.text
        assert not gate.ready()

        release.set()
        assert gate.wait(timeout=2.0) is fake_renderer

    def test_wait_when_loader_raises_then_none_with_error(self):
        def broken_loader():
            raise ImportError("no module named latex2mathml")

        gate = RendererGate(loader=broken_loader, poll_interval=0.01)
        assert gate.wait(timeout=2.0) is None
        assert not gate.ready()
        assert "ImportError" in gate.load_error

    def test_start_when_called_twice_then_loader_runs_once(self, fake_renderer):
        calls = []

        def counting_loader():
            calls.append(1)
            return fake_renderer

        gate = RendererGate(loader=counting_loader, poll_interval=0.01)
        gate.start()
        gate.start()
        gate.wait(timeout=2.0)
        gate.wait(timeout=2.0)
        assert len(calls) == 1

    def test_init_when_poll_interval_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="poll_interval must be positive"):
            RendererGate(poll_interval=0)

    def test_wait_when_default_loader_then_latex2mathml_ready(self):
        gate = RendererGate()
        renderer = gate.wait(timeout=10.0)
        assert renderer is not None
