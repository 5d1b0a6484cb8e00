"""
Tests for builder.output.html

Test Coverage:
- Placeholder elements and fragment insertion
- Escaping of config strings and unrendered sources
- Decorations, instructions and answer key markup
- Style and layout values in CSS
- Layout hints as block classes
"""

from mcq_toolkit.core.models import Option, Section
from mcq_toolkit.builder.config import AnswerKeyMode, DocumentConfig, FontWeight, Watermark
from mcq_toolkit.builder.layout.composer import assemble, assemble_questions
from mcq_toolkit.builder.layout.config import PrintLayoutConfig
from mcq_toolkit.builder.layout.models import KEEP_TOGETHER, NEW_PAGE, LayoutHints, Placeholder
from mcq_toolkit.builder.output.html import block_classes, fill_placeholder, render_html
from mcq_toolkit.builder.rendering.adapter import MathRenderAdapter, RenderedFragment


class TestFillPlaceholder:
    def test_fill_when_fragment_then_markup_unescaped(self):
        placeholder = Placeholder("q-1-question-text", "1", "question-text", "$x$")
        fragments = {"q-1-question-text": RenderedFragment(markup="<math>x</math>")}
        assert fill_placeholder(placeholder, fragments) == "<math>x</math>"

    def test_fill_when_missing_then_escaped_source(self):
        placeholder = Placeholder("q-1-option-0", "1", "option-0", "a < b")
        assert fill_placeholder(placeholder, {}) == "a &lt; b"

    def test_fill_when_plain_string_then_used_as_markup(self):
        placeholder = Placeholder("p", "1", "option-0", "")
        assert fill_placeholder(placeholder, {"p": "<b>ok</b>"}) == "<b>ok</b>"


class TestBlockClasses:
    def test_block_classes_when_no_hints_then_base_only(self):
        assert block_classes("question", LayoutHints()) == "question"

    def test_block_classes_when_keep_together_then_class_added(self):
        assert block_classes("question", KEEP_TOGETHER) == "question keep-together"

    def test_block_classes_when_new_page_then_break_and_full_width(self):
        assert block_classes("answer-key", NEW_PAGE) == "answer-key new-page full-width"


class TestRenderHtml:
    """Tests for the complete document."""

    def test_render_when_fragments_then_placeholder_elements_prefilled(
        self, default_config, make_question, fake_renderer
    ):
        document = assemble_questions(default_config, [make_question("q1", "Find $x$")])
        fragments = MathRenderAdapter(fake_renderer).render_placeholders(document.placeholders)
        html = render_html(document, fragments)

        assert 'id="q-q1-question-text"' in html
        assert '<m class="inline">x</m>' in html
        for index in range(4):
            assert f'id="q-q1-option-{index}"' in html

    def test_render_when_config_strings_have_html_then_escaped(self, make_question):
        config = DocumentConfig(
            paper_title="<script>alert(1)</script>",
            header=["A & B"],
            footer=["<i>f</i>"],
            watermark=Watermark(enabled=True, text="<w>"),
        )
        html = render_html(assemble_questions(config, [make_question("q1")]), {})
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "A &amp; B" in html
        assert "&lt;i&gt;f&lt;/i&gt;" in html
        assert '<div class="watermark">&lt;w&gt;</div>' in html

    def test_render_when_sections_then_headers_and_numbers(self, default_config, two_sections):
        html = render_html(assemble(default_config, two_sections), {})
        assert '<div class="section-header keep-together">Physics</div>' in html
        assert '<div class="section-header keep-together">Chemistry</div>' in html
        assert '<span class="question-header">5.</span>' in html

    def test_render_when_no_instructions_then_no_instructions_block(self, default_config, two_sections):
        html = render_html(assemble(default_config, two_sections), {})
        assert 'class="instructions' not in html

    def test_render_when_instructions_then_preformatted(self, two_sections):
        config = DocumentConfig(instructions="Line 1\nLine 2")
        html = render_html(assemble(config, two_sections), {})
        assert "<pre>Line 1\nLine 2</pre>" in html

    def test_render_when_key_only_then_grid(self, two_sections):
        config = DocumentConfig(answer_key_display_mode=AnswerKeyMode.KEY_ONLY)
        html = render_html(assemble(config, two_sections), {})
        assert '<div class="answer-key-grid">' in html
        assert '<div class="answer-item">1. A)</div>' in html
        assert '<div class="answer-item">5. D)</div>' in html

    def test_render_when_explanations_then_prefixed(self, make_question, fake_renderer):
        config = DocumentConfig(answer_key_display_mode=AnswerKeyMode.KEY_AND_EXPLANATION)
        document = assemble_questions(
            config, [make_question("q1", correct_answer="B", explanation="Since $y$")]
        )
        fragments = MathRenderAdapter(fake_renderer).render_placeholders(document.placeholders)
        html = render_html(document, fragments)

        assert "Answer Key &amp; Explanations" in html
        assert "Explanation: <span id=\"q-q1-explanation\">" in html
        assert '<m class="inline">y</m>' in html
        assert "answer-key-grid\"" not in html

    def test_render_when_mode_none_then_no_answer_key(self, default_config, two_sections):
        html = render_html(assemble(default_config, two_sections), {})
        assert 'class="answer-key' not in html

    def test_render_when_style_then_font_sizes_in_css(self, make_question):
        config = DocumentConfig(font_size=14, font_weight=FontWeight.BOLD, font_color="#112233")
        html = render_html(assemble_questions(config, [make_question("q1")]), {})
        assert "font-size: 14px;" in html
        assert "font-weight: bold;" in html
        assert "color: #112233;" in html
        assert "font-size: 15px;" in html
        assert "font-size: 13px;" in html

    def test_render_when_layout_then_column_count_in_css(self, default_config, make_question):
        document = assemble_questions(default_config, [make_question("q1")])
        html = render_html(document, {}, PrintLayoutConfig(column_count=1, column_gap_px=8))
        assert "column-count: 1;" in html
        assert "column-gap: 8px;" in html

    def test_render_when_images_then_img_tags(self, default_config, make_question):
        question = make_question(
            "q1",
            question_image="http://img/q.png",
            options=(Option("a", image="http://img/a.png"), Option("b")),
        )
        html = render_html(assemble(default_config, [Section("", (question,))]), {})
        assert 'src="http://img/q.png"' in html
        assert 'src="http://img/a.png"' in html
        assert html.count("<img ") == 2

    def test_render_when_block_hints_then_classes_on_blocks(self, make_question):
        config = DocumentConfig(
            instructions="Read carefully",
            answer_key_display_mode=AnswerKeyMode.KEY_ONLY,
        )
        html = render_html(assemble_questions(config, [make_question("q1")]), {})

        assert '<div class="header full-width">' in html
        assert '<div class="instructions full-width">' in html
        assert '<div class="question keep-together" data-question-id="q1">' in html
        assert '<div class="answer-key new-page full-width">' in html
        assert ".keep-together {" in html
        assert ".new-page {" in html
