"""
Tests for builder.controller

Test Coverage:
- build_paper(): Happy path, isolation of failing formulas
- Renderer fallback when not ready
- Fatal errors
- Writing output
- Shared default renderer gate
"""

import threading

import pytest

from mcq_toolkit.core.models import Section
from mcq_toolkit.builder.config import AnswerKeyMode, DocumentConfig
from mcq_toolkit.builder import controller as controller_module
from mcq_toolkit.builder.controller import BuildError, build_paper, default_gate
from mcq_toolkit.builder.loading.importer import parse_quiz_json, sample_quiz_json
from mcq_toolkit.builder.rendering.readiness import RendererGate


class TestBuildPaper:
    """Tests for build_paper()."""

    def test_build_when_valid_then_html_and_fragments(self, default_config, two_sections, fake_renderer):
        result = build_paper(default_config, two_sections, renderer=fake_renderer)

        assert result.document.question_count == 5
        assert set(result.fragments) == {p.id for p in result.document.placeholders}
        assert result.html.startswith("<!DOCTYPE html>")
        assert result.ok
        assert result.warnings == ()
        assert result.output_path is None

    def test_build_when_one_formula_malformed_then_siblings_rendered(self, default_config, make_question, fake_renderer):
        sections = [Section("", (
            make_question("good1", "Compute $a+b$"),
            make_question("broken", "Compute $\\BAD{$"),
            make_question("good2", "Compute $c$"),
        ))]
        result = build_paper(default_config, sections, renderer=fake_renderer)

        assert '<m class="inline">a+b</m>' in result.html
        assert '<m class="inline">c</m>' in result.html
        assert 'class="math-error"' in result.html
        assert len(result.errors) == 1
        assert result.errors[0].startswith("q-broken-question-text: ")

    def test_build_when_flat_question_list_then_single_section(self, default_config, make_question, fake_renderer):
        result = build_paper(
            default_config, [make_question("a"), make_question("b")], renderer=fake_renderer
        )
        assert len(result.document.sections) == 1
        assert result.document.sections[0].header is None

    def test_build_when_unresolved_answers_then_warning(self, make_question, fake_renderer):
        config = DocumentConfig(answer_key_display_mode=AnswerKeyMode.KEY_ONLY)
        result = build_paper(
            config, [make_question("q1", correct_answer="Z")], renderer=fake_renderer
        )
        assert result.warnings == ("Question 1: correct answer could not be resolved",)

    def test_build_when_ids_sanitize_alike_then_both_built(self, default_config, make_question, fake_renderer):
        result = build_paper(
            default_config,
            [make_question("q 1", "one $a$"), make_question("q_1", "two $b$")],
            renderer=fake_renderer,
        )
        assert result.document.question_count == 2
        assert result.ok
        assert '<m class="inline">a</m>' in result.html
        assert '<m class="inline">b</m>' in result.html

    def test_build_when_no_questions_then_build_error(self, default_config, fake_renderer):
        with pytest.raises(BuildError, match="No questions"):
            build_paper(default_config, [], renderer=fake_renderer)

    def test_build_when_output_path_then_file_written(self, default_config, two_sections, fake_renderer, tmp_path):
        target = tmp_path / "nested" / "paper.html"
        result = build_paper(default_config, two_sections, renderer=fake_renderer, output_path=target)

        assert result.output_path == target
        assert target.read_text(encoding="utf-8") == result.html


class TestBuildPaperRendererReadiness:
    """Tests for bounded waiting on the renderer."""

    def test_build_when_renderer_never_ready_then_plain_text_fallback(self, default_config, make_question):
        never = threading.Event()

        def stuck_loader():
            never.wait(5.0)
            raise RuntimeError("gave up")

        gate = RendererGate(loader=stuck_loader, poll_interval=0.01)
        result = build_paper(
            default_config,
            [make_question("q1", "If $x<y$")],
            renderer=gate,
            readiness_timeout=0.05,
        )
        never.set()

        assert '<span class="math-fallback">$x&lt;y$</span>' in result.html
        assert result.warnings == ("Math renderer unavailable; math is shown as plain text",)
        assert all(f.degraded for f in result.fragments.values())

    def test_build_when_gate_ready_then_renderer_used(self, default_config, make_question, fake_renderer):
        gate = RendererGate.for_renderer(fake_renderer)
        result = build_paper(default_config, [make_question("q1", "$z$")], renderer=gate)
        assert '<m class="inline">z</m>' in result.html

    def test_default_gate_when_called_concurrently_then_single_gate_started(self, monkeypatch):
        started = []

        class CountingGate:
            def start(self):
                started.append(self)

        monkeypatch.setattr(controller_module, "_DEFAULT_GATE", None)
        monkeypatch.setattr(controller_module, "RendererGate", CountingGate)

        barrier = threading.Barrier(8)
        gates = []

        def call():
            barrier.wait()
            gates.append(default_gate())

        threads = [threading.Thread(target=call) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(started) == 1
        assert all(gate is started[0] for gate in gates)

class TestBuildPaperEndToEnd:
    def test_build_when_sample_import_then_answer_key_label(self):
        """Sample quiz through import, default latex2mathml renderer and HTML."""
        imported = parse_quiz_json(sample_quiz_json())
        config = imported.to_document_config(
            answer_key_display_mode=AnswerKeyMode.KEY_AND_EXPLANATION
        )
        result = build_paper(config, imported.sections, readiness_timeout=10.0)

        assert result.document.answer_key.entries[0].label == "B)"
        assert "1. B)" in result.html
        assert "Biology Section" in result.html
        assert "Explanation: " in result.html
