"""
Module: builder

Purpose:
    Paper building pipeline for multiple-choice question papers.
    Segments mixed text/math strings, assembles numbered sections and an
    answer key into a structured document, renders math, and emits
    printable HTML.

Key Functions:
    - build_paper(): Main entry point
    - assemble(): Structured document without rendering
    - parse_quiz_json(): Import questions from a quiz JSON export

Key Classes:
    - DocumentConfig: Configuration for a paper
    - BuildResult: Complete build result

Dependencies:
    - latex2mathml: Math rendering
    - jinja2 / markupsafe: HTML emission and escaping
    - jsonschema: Import validation
"""

from .config import AnswerKeyMode, DocumentConfig, FontWeight, Watermark
from .layout import assemble, AssemblyError
from .loading import parse_quiz_json, sample_quiz_json, ImportResult
from .controller import build_paper, BuildResult, BuildError

__all__ = [
    # Config
    "AnswerKeyMode",
    "DocumentConfig",
    "FontWeight",
    "Watermark",
    # Layout
    "assemble",
    "AssemblyError",
    # Loading
    "parse_quiz_json",
    "sample_quiz_json",
    "ImportResult",
    # Controller
    "build_paper",
    "BuildResult",
    "BuildError",
]
