"""
Module: builder.loading

Purpose:
    Data mapping from external quiz payloads into Questions and Sections.

Key Functions:
    - parse_quiz_json(): Import a quiz JSON export
    - sample_quiz_json(): Bundled demonstration payload
"""

from .importer import ImportResult, map_question, parse_quiz_json, sample_quiz_json

__all__ = [
    "ImportResult",
    "map_question",
    "parse_quiz_json",
    "sample_quiz_json",
]
