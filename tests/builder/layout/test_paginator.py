"""
Unit tests for the paginator.

Every physical page gets the next index, margins resolved from that
index, and a page number of index + 1 unless its flow is unnumbered.
"""

import pytest
from reportlab.pdfbase.pdfmetrics import stringWidth

from workbook_toolkit.builder.layout.config import LayoutConfig
from workbook_toolkit.builder.layout.models import PageFlow, RenderBlock, TextLine, TextStyle
from workbook_toolkit.builder.layout.paginator import paginate, wrap_text
from workbook_toolkit.core.models import TrimSize


def _lines(count, style="body", prefix="Line"):
    return tuple(TextLine(f"{prefix} {i}", style=style) for i in range(count))


def _content_bottom(page, config):
    return page.spec.height - page.spec.margins.bottom - config.footer_reserve


@pytest.fixture
def layout():
    return LayoutConfig()


@pytest.fixture
def title_flow():
    block = RenderBlock(kind="title", lines=(TextLine("My Book", style="book_title"),))
    return PageFlow(kind="title", blocks=(block,), numbered=False, vertical_center=True)


class TestPageStream:
    """Tests for page indices, margins and numbering."""

    def test_paginate_when_flows_given_then_each_starts_new_page(self, layout, title_flow):
        flows = [
            title_flow,
            PageFlow(kind="contents", blocks=(RenderBlock(kind="contents", lines=_lines(2)),)),
            PageFlow(kind="section", blocks=(RenderBlock(kind="heading", lines=_lines(1)),)),
        ]

        result = paginate(flows, TrimSize.SIX_BY_NINE, layout)

        assert [p.kind for p in result.pages] == ["title", "contents", "section"]
        assert [p.index for p in result.pages] == [0, 1, 2]

    def test_paginate_when_content_overflows_then_continues_on_new_pages(self, layout, title_flow):
        section = PageFlow(kind="section", blocks=(RenderBlock(kind="body", lines=_lines(100)),))

        result = paginate([title_flow, section], TrimSize.SIX_BY_NINE, layout)

        section_pages = [p for p in result.pages if p.kind == "section"]
        assert len(section_pages) >= 3
        placed = [t for p in section_pages for t in p.texts]
        assert placed == [f"Line {i}" for i in range(100)]

    def test_paginate_when_many_pages_then_margins_follow_index_parity(self, layout, title_flow):
        section = PageFlow(kind="section", blocks=(RenderBlock(kind="body", lines=_lines(120)),))

        result = paginate([title_flow, section], TrimSize.SIX_BY_NINE, layout)

        for page in result.pages:
            expected_left = 54 if page.index % 2 == 0 else 36
            assert page.spec.margins.left == expected_left
            for placement in page.placements:
                if placement.style.align == "left":
                    assert placement.x == expected_left + placement.style.indent

    def test_paginate_when_many_pages_then_content_inside_margins(self, layout, title_flow):
        section = PageFlow(kind="section", blocks=(RenderBlock(kind="body", lines=_lines(120)),))

        result = paginate([title_flow, section], TrimSize.LETTER, layout)

        for page in result.pages:
            for placement in page.placements:
                assert placement.top >= page.spec.margins.top
                assert placement.bottom <= _content_bottom(page, layout)

    def test_paginate_when_numbered_then_number_is_index_plus_one(self, layout, title_flow):
        section = PageFlow(kind="section", blocks=(RenderBlock(kind="body", lines=_lines(80)),))

        result = paginate([title_flow, section], TrimSize.SIX_BY_NINE, layout)

        assert result.pages[0].page_number is None
        for page in result.pages[1:]:
            assert page.page_number == page.index + 1

    def test_paginate_when_numbers_disabled_then_no_numbers(self):
        config = LayoutConfig(show_page_numbers=False)
        section = PageFlow(kind="section", blocks=(RenderBlock(kind="body", lines=_lines(3)),))

        result = paginate([section], TrimSize.LETTER, config)

        assert all(p.page_number is None for p in result.pages)

    def test_paginate_when_section_flow_then_section_index_carried(self, layout):
        flow = PageFlow(kind="section", blocks=(RenderBlock(kind="body", lines=_lines(60)),), section_index=3)

        result = paginate([flow], TrimSize.SIX_BY_NINE, layout)

        assert {p.section_index for p in result.pages} == {3}


class TestBlockPlacement:
    """Tests for keep-together blocks and spacing."""

    def test_paginate_when_block_does_not_fit_then_moved_whole(self, layout):
        filler = RenderBlock(kind="body", lines=_lines(30))
        exercise = RenderBlock(kind="exercise", lines=_lines(5, prefix="Item"), keep_together=True)
        flow = PageFlow(kind="section", blocks=(filler, exercise))

        result = paginate([flow], TrimSize.SIX_BY_NINE, layout)

        assert result.page_count == 2
        assert not any(t.startswith("Item") for t in result.pages[0].texts)
        assert result.pages[1].texts == tuple(f"Item {i}" for i in range(5))
        assert result.warnings == ()

    def test_paginate_when_block_fits_then_stays_on_page(self, layout):
        filler = RenderBlock(kind="body", lines=_lines(10))
        exercise = RenderBlock(kind="exercise", lines=_lines(5, prefix="Item"), keep_together=True)

        result = paginate([PageFlow(kind="section", blocks=(filler, exercise))], TrimSize.SIX_BY_NINE, layout)

        assert result.page_count == 1

    def test_paginate_when_block_taller_than_page_then_split_with_warning(self, layout):
        exercise = RenderBlock(kind="exercise", lines=_lines(60, prefix="Item"), keep_together=True)

        result = paginate([PageFlow(kind="section", blocks=(exercise,))], TrimSize.SIX_BY_NINE, layout)

        assert result.page_count == 2
        assert len(result.warnings) == 1
        assert "exercise block overflows" in result.warnings[0]

    def test_paginate_when_row_at_page_top_then_space_before_dropped(self, layout):
        block = RenderBlock(kind="exercise", lines=(TextLine("1. First", style="exercise_title"),))

        result = paginate([PageFlow(kind="section", blocks=(block,))], TrimSize.SIX_BY_NINE, layout)

        page = result.pages[0]
        assert page.placements[0].top == page.spec.margins.top

    def test_paginate_when_vertical_center_then_title_shifted_down(self, layout, title_flow):
        result = paginate([title_flow], TrimSize.SIX_BY_NINE, layout)

        placement = result.pages[0].placements[0]
        assert placement.top > result.pages[0].spec.margins.top + 200

    def test_paginate_when_centered_style_then_x_centres_text(self, layout, title_flow):
        result = paginate([title_flow], TrimSize.SIX_BY_NINE, layout)

        page = result.pages[0]
        placement = page.placements[0]
        width = stringWidth("My Book", "Helvetica-Bold", 28)
        assert placement.x == pytest.approx(page.spec.margins.left + (page.spec.content_width - width) / 2)

    def test_paginate_when_cells_wrap_then_continuation_below(self, layout):
        long_left = "a very long left hand item that cannot fit inside forty percent"
        row = TextLine(style="matching_row", cells=(f"1. {long_left}", "___", "A. short"))
        block = RenderBlock(kind="exercise", lines=(row,))

        result = paginate([PageFlow(kind="section", blocks=(block,))], TrimSize.SIX_BY_NINE, layout)

        placements = result.pages[0].placements
        left_column = [p for p in placements if p.x == placements[0].x]
        assert len(left_column) >= 2
        assert left_column[1].top == left_column[0].top + layout.style("matching_row").leading
        blank = next(p for p in placements if p.text == "___")
        assert blank.x > placements[0].x


class TestWrapText:
    """Tests for wrap_text()."""

    def test_wrap_when_text_too_wide_then_every_line_fits(self):
        style = TextStyle("body")
        text = " ".join(["workbook"] * 40)

        lines = wrap_text(text, style, 200)

        assert len(lines) > 1
        assert all(stringWidth(line, style.font_name, style.font_size) <= 200 for line in lines)
        assert " ".join(lines) == text

    def test_wrap_when_newlines_then_hard_breaks(self):
        assert wrap_text("one\ntwo", TextStyle("body"), 500) == ["one", "two"]

    def test_wrap_when_empty_then_single_empty_line(self):
        assert wrap_text("", TextStyle("body"), 500) == [""]
