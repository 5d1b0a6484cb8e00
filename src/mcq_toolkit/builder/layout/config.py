"""
Module: builder.layout.config

Purpose:
    Configuration for the print surface layout hints.
    Defines column layout, page margins and decoration styling.

Key Classes:
    - PrintLayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.output.html: Print markup emission
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PrintLayoutConfig:
    """
    Configuration for the printed layout (immutable).

    Column balancing and page breaks are left to the presentation layer;
    these values only parameterize the hints it receives.

    Attributes:
        column_count: Columns in the questions container
        column_gap_px: Gap between columns
        page_margin_in: Page margin on every side, in inches
        font_family: CSS font stack for body text
        line_height: Body line height
        title_font_size_px: Paper title size
        watermark_font_size_px: Watermark text size
        watermark_opacity: Watermark alpha (0-1)
        watermark_rotation_deg: Watermark rotation
        answer_key_column_min_width_px: Min cell width in the KEY_ONLY grid

    Example:
        >>> config = PrintLayoutConfig(column_count=1)
        >>> config.page_margin
        '0.5in'
    """

    column_count: int = 2
    column_gap_px: int = 20
    page_margin_in: float = 0.5
    font_family: str = "'Times New Roman', serif"
    line_height: float = 1.4
    title_font_size_px: int = 22
    watermark_font_size_px: int = 48
    watermark_opacity: float = 0.1
    watermark_rotation_deg: int = -45
    answer_key_column_min_width_px: int = 120

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.column_count < 1:
            raise ValueError(f"column_count must be at least 1: {self.column_count}")
        if self.column_gap_px < 0:
            raise ValueError(f"column_gap_px must be non-negative: {self.column_gap_px}")
        if self.page_margin_in < 0:
            raise ValueError(f"page_margin_in must be non-negative: {self.page_margin_in}")
        if not (0.0 <= self.watermark_opacity <= 1.0):
            raise ValueError(f"watermark_opacity must be 0-1: {self.watermark_opacity}")
        if self.answer_key_column_min_width_px <= 0:
            raise ValueError("answer_key_column_min_width_px must be positive")

    @property
    def page_margin(self) -> str:
        """Page margin as a CSS length."""
        return f"{self.page_margin_in:g}in"
