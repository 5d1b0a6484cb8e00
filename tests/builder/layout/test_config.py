"""
Unit tests for DocumentConfig, Watermark and PrintLayoutConfig.
"""

import pytest

from mcq_toolkit.builder.config import (
    AnswerKeyMode,
    DocumentConfig,
    FontWeight,
    OPTION_NUMBERING_STYLES,
    Watermark,
)
from mcq_toolkit.builder.layout.config import PrintLayoutConfig


class TestDocumentConfig:
    """Tests for DocumentConfig dataclass."""

    def test_init_when_defaults_then_expected_values(self):
        config = DocumentConfig()
        assert config.font_size == 12
        assert config.font_weight is FontWeight.NORMAL
        assert config.font_color == "#000000"
        assert config.option_numbering_style == "A)"
        assert config.answer_key_display_mode is AnswerKeyMode.NONE
        assert config.watermark.is_visible is False

    def test_init_when_lists_then_stored_as_tuples(self):
        config = DocumentConfig(header=["a"], footer=["b"])
        assert config.header == ("a",)
        assert config.footer == ("b",)

    def test_init_when_zero_font_size_then_raises_error(self):
        with pytest.raises(ValueError, match="font_size must be positive"):
            DocumentConfig(font_size=0)

    def test_init_when_unknown_numbering_style_then_raises_error(self):
        with pytest.raises(ValueError, match="option_numbering_style"):
            DocumentConfig(option_numbering_style="i)")

    def test_init_when_bad_color_then_raises_error(self):
        with pytest.raises(ValueError, match="font_color"):
            DocumentConfig(font_color="#12")

    def test_init_when_mode_is_string_then_raises_error(self):
        with pytest.raises(ValueError, match="answer_key_display_mode"):
            DocumentConfig(answer_key_display_mode="KEY_ONLY")

    def test_styles_when_listed_then_six_tokens(self):
        assert OPTION_NUMBERING_STYLES == ("A)", "(A)", "a)", "(a)", "1)", "(1)")

    def test_to_dict_when_round_tripped_then_equal(self):
        config = DocumentConfig(
            paper_title="T",
            instructions="I",
            header=("h",),
            footer=("f",),
            watermark=Watermark(enabled=True, text="W"),
            font_size=13,
            font_weight=FontWeight.BOLD,
            font_color="navy",
            option_numbering_style="(1)",
            answer_key_display_mode=AnswerKeyMode.KEY_AND_EXPLANATION,
        )
        assert DocumentConfig.from_dict(config.to_dict()) == config

    def test_from_dict_when_empty_then_defaults(self):
        assert DocumentConfig.from_dict({}) == DocumentConfig()


class TestWatermark:
    def test_is_visible_when_enabled_but_blank_then_false(self):
        assert Watermark(enabled=True, text="  ").is_visible is False

    def test_from_dict_when_none_then_disabled(self):
        assert Watermark.from_dict(None) == Watermark()


class TestPrintLayoutConfig:
    def test_init_when_defaults_then_two_columns(self):
        layout = PrintLayoutConfig()
        assert layout.column_count == 2
        assert layout.page_margin == "0.5in"

    def test_init_when_zero_columns_then_raises_error(self):
        with pytest.raises(ValueError, match="column_count"):
            PrintLayoutConfig(column_count=0)

    def test_init_when_opacity_out_of_range_then_raises_error(self):
        with pytest.raises(ValueError, match="watermark_opacity"):
            PrintLayoutConfig(watermark_opacity=1.5)
