"""
Unit Tests for Section Model and Section Helpers
"""

from mcq_toolkit.core.models.sections import (
    Section,
    group_by_section_name,
    iter_questions,
    sections_from_questions,
)


class TestSection:
    """Tests for Section dataclass."""

    def test_init_when_name_none_then_empty_string(self, make_question):
        section = Section(None, [make_question("q1")])
        assert section.name == ""
        assert section.is_named is False
        assert isinstance(section.questions, tuple)

    def test_is_named_when_whitespace_then_false(self):
        assert Section("   ", ()).is_named is False

    def test_iter_when_iterated_then_yields_questions_in_order(self, make_question):
        questions = (make_question("a"), make_question("b"))
        assert [q.id for q in Section("S", questions)] == ["a", "b"]


class TestSectionHelpers:
    """Tests for flat-list helpers."""

    def test_sections_from_questions_when_flat_list_then_single_unnamed_section(self, make_question):
        sections = sections_from_questions([make_question("a"), make_question("b")])
        assert len(sections) == 1
        assert sections[0].name == ""
        assert sections[0].question_count == 2

    def test_sections_from_questions_when_empty_then_no_sections(self):
        assert sections_from_questions([]) == []

    def test_group_by_section_name_when_names_repeat_then_only_consecutive_merged(self, make_question):
        questions = [
            make_question("1", section_name="Physics"),
            make_question("2", section_name="Physics"),
            make_question("3", section_name="Chemistry"),
            make_question("4", section_name="Physics"),
        ]
        sections = group_by_section_name(questions)
        assert [s.name for s in sections] == ["Physics", "Chemistry", "Physics"]
        assert [s.question_count for s in sections] == [2, 1, 1]

    def test_group_by_section_name_when_no_names_then_one_unnamed_section(self, make_question):
        sections = group_by_section_name([make_question("1"), make_question("2")])
        assert len(sections) == 1
        assert sections[0].is_named is False

    def test_iter_questions_when_multiple_sections_then_document_order(self, make_question):
        sections = [
            Section("A", (make_question("1"), make_question("2"))),
            Section("B", (make_question("3"),)),
        ]
        assert [q.id for q in iter_questions(sections)] == ["1", "2", "3"]
