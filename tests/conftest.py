import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import mcq_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mcq_toolkit.core.models import Option, Question, Section  # noqa: E402
from mcq_toolkit.builder.config import DocumentConfig  # noqa: E402
from mcq_toolkit.builder.rendering.renderer import MathRenderError, RenderOptions  # noqa: E402


class FakeRenderer:
    """Renderer double: wraps source in <m> tags and fails on 'BAD'."""

    def __init__(self, fail_on: str = "BAD"):
        self.fail_on = fail_on
        self.calls = []

    def render_to_string(self, latex: str, options: RenderOptions) -> str:
        self.calls.append((latex, options))
        if self.fail_on and self.fail_on in latex:
            if options.throw_on_error:
                raise MathRenderError(f"Undefined control sequence in {latex}", latex=latex)
            return f'<span class="inline-error">{latex}</span>'
        mode = "display" if options.display_mode else "inline"
        return f'<m class="{mode}">{latex}</m>'


def make_question(qid: str, text: str = "What is $x$?", **kwargs) -> Question:
    """Question with four options A-D unless options are given."""
    options = kwargs.pop("options", ("Puberty", "Embryonic development stage", "Birth", "Adult"))
    return Question(
        id=qid,
        question_text=text,
        options=tuple(o if isinstance(o, Option) else Option(o) for o in options),
        **kwargs,
    )


@pytest.fixture
def fake_renderer():
    """Renderer double that fails for formulas containing 'BAD'."""
    return FakeRenderer()


@pytest.fixture
def sample_question():
    """The oogenesis question from the bundled sample quiz."""
    return make_question(
        "sample1",
        "At which stage of life the oogenesis process is initiated?",
        correct_answer="B",
        explanation="Oogenesis starts in the $2^{nd}$ trimester.",
    )


@pytest.fixture
def two_sections():
    """Two named sections with 3 and 2 questions."""
    physics = Section("Physics", tuple(make_question(f"p{i}", correct_answer="A") for i in range(3)))
    chemistry = Section("Chemistry", tuple(make_question(f"c{i}", correct_answer="D") for i in range(2)))
    return [physics, chemistry]


@pytest.fixture
def default_config():
    """DocumentConfig with a title and defaults elsewhere."""
    return DocumentConfig(paper_title="Unit Test Paper")


@pytest.fixture(name="make_question")
def make_question_fixture():
    """Factory for questions: make_question(id, text="...", **fields)."""
    return make_question
