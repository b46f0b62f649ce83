"""
Module: builder.layout.config

Purpose:
    Configuration for the page layout engine.
    Defines the text styles of the render tree and the footer space
    reserved for page numbers. Page size and margins are not configured
    here; they come from the trim size (see print_spec).

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Measuring and placing lines
    - builder.output.renderer: Page number position
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .models import TextStyle


DEFAULT_STYLES: Dict[str, TextStyle] = {s.name: s for s in (
    TextStyle("body"),
    # Title page
    TextStyle("book_title", font_name="Helvetica-Bold", font_size=28, leading=34,
              align="center", space_after=12),
    TextStyle("book_subtitle", font_size=16, leading=22, color="#555555",
              align="center", space_after=24),
    TextStyle("author_name", font_size=14, leading=20, color="#777777", align="center"),
    # Table of contents
    TextStyle("toc_title", font_name="Helvetica-Bold", font_size=20, leading=26, space_after=20),
    TextStyle("toc_entry", font_size=12, leading=18, space_after=6, rule_below=True),
    # Sections
    TextStyle("section_title", font_name="Helvetica-Bold", font_size=20, leading=26, space_after=8),
    TextStyle("section_description", font_size=11, leading=16.5, color="#555555", space_after=16),
    # Exercises
    TextStyle("exercise_title", font_name="Helvetica-Bold", font_size=14, leading=20,
              space_before=16, space_after=4),
    TextStyle("exercise_type", font_size=9, leading=13, color="#888888", space_after=4),
    TextStyle("instructions", font_name="Helvetica-Oblique", font_size=10, leading=15,
              color="#444444", space_after=10),
    TextStyle("item", indent=8, space_after=6),
    TextStyle("option", indent=16, space_after=3),
    TextStyle("answer_rule", font_size=9, leading=13, color="#999999", indent=8, space_after=6),
    TextStyle("passage", leading=17.6, space_after=10),
    TextStyle("matching_row", space_after=4, column_fractions=(0.4, 0.2, 0.4)),
    TextStyle("word_list", font_size=10, leading=15, space_after=4,
              column_fractions=(1 / 3, 1 / 3, 1 / 3)),
    TextStyle("prompt", space_after=8),
    TextStyle("note", font_size=9, leading=13, color="#999999", space_before=8),
    # Answer key
    TextStyle("answer_key_title", font_name="Helvetica-Bold", font_size=20, leading=26, space_after=16),
    TextStyle("answer_section_title", font_name="Helvetica-Bold", font_size=12, leading=18,
              space_before=12, space_after=4),
    TextStyle("answer_exercise_title", font_name="Helvetica-Bold", font_size=10, leading=15),
    TextStyle("answer_text", font_size=10, leading=15, color="#333333", space_after=6),
    # Footer
    TextStyle("page_number", font_size=9, leading=13, color="#aaaaaa", align="center"),
)}


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    Attributes:
        styles: Style name -> TextStyle
        footer_reserve: Extra space above the bottom margin kept free for the page number
        page_number_offset: Baseline of the page number above the page's bottom edge
        show_page_numbers: Whether numbered flows get page numbers

    Example:
        >>> config = LayoutConfig()
        >>> config.style("item").indent
        8
    """

    styles: Dict[str, TextStyle] = field(default_factory=lambda: dict(DEFAULT_STYLES))
    footer_reserve: float = 20
    page_number_offset: float = 20
    show_page_numbers: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.footer_reserve < 0:
            raise ValueError(f"footer_reserve must be non-negative: {self.footer_reserve}")
        if self.page_number_offset < 0:
            raise ValueError(f"page_number_offset must be non-negative: {self.page_number_offset}")
        missing = [name for name in DEFAULT_STYLES if name not in self.styles]
        if missing:
            raise ValueError(f"styles missing required entries: {missing}")

    def style(self, name: str) -> TextStyle:
        """Look up a style, falling back to the body style."""
        return self.styles.get(name, self.styles["body"])
