"""
Module: builder.layout.paginator

Purpose:
    Flow render blocks onto physical pages.
    Each PageFlow starts on a new page and continues onto as many pages
    as its content needs. Every page opened gets the next page index,
    and its margins are resolved from that index before anything is
    placed on it.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    1. Measure each block: wrap every paragraph to the content width
       using the font metrics of its style
    2. If the block must stay together and does not fit in the space
       left, start a new page (unless the page is still empty)
    3. Place rows one by one, starting a new page when out of space
    4. Drop space_before at the top of a page

Dependencies:
    - reportlab.pdfbase.pdfmetrics: String widths for wrapping
    - reportlab.lib.utils.simpleSplit: Word wrapping
    - builder.layout.models: RenderBlock, PageFlow, Page
    - builder.layout.print_spec: resolve()

Used By:
    - builder.controller: compile_book()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from workbook_toolkit.core.models.config import TrimSize

from .config import LayoutConfig
from .models import LinePlacement, Page, PageFlow, PrintSpec, RenderBlock, TextLine, TextStyle
from .print_spec import resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutResult:
    """
    Pagination output with diagnostics.

    Attributes:
        pages: Physical pages in order
        warnings: Overflow warnings
    """

    pages: Tuple[Page, ...]
    warnings: Tuple[str, ...] = ()

    @property
    def page_count(self) -> int:
        return len(self.pages)


@dataclass(frozen=True)
class _Fragment:
    """Text drawn at an offset within a row."""
    text: str
    x_offset: float
    y_offset: float = 0.0


@dataclass(frozen=True)
class _Row:
    """One measured line (or row of cell lines) ready for placement."""
    fragments: Tuple[_Fragment, ...]
    style: TextStyle
    height: float
    space_before: float
    space_after: float


def paginate(
    flows: Sequence[PageFlow],
    trim_size: TrimSize,
    config: LayoutConfig,
) -> LayoutResult:
    """
    Arrange flows onto physical pages.

    Args:
        flows: Page flows in output order
        trim_size: Book trim size
        config: Layout configuration

    Returns:
        LayoutResult with one Page per physical page

    Example:
        >>> result = paginate(flows, TrimSize.SIX_BY_NINE, LayoutConfig())
        >>> [p.index for p in result.pages]
        [0, 1, 2, 3]
    """
    paginator = _Paginator(trim_size, config)
    for flow in flows:
        paginator.add_flow(flow)
    pages = paginator.finish()

    logger.info(f"Paginated {len(flows)} flows onto {len(pages)} pages")

    return LayoutResult(pages=tuple(pages), warnings=tuple(paginator.warnings))


class _Paginator:
    """Stateful page filler for a single paginate() call."""

    def __init__(self, trim_size: TrimSize, config: LayoutConfig) -> None:
        self.trim_size = trim_size
        self.config = config
        self.pages: List[Page] = []
        self.warnings: List[str] = []

        self._next_index = 0
        self._flow: Optional[PageFlow] = None
        self._spec: Optional[PrintSpec] = None
        self._placements: List[LinePlacement] = []
        self._cursor = 0.0

    # ─────────────────────────────────────────────────────────────────────
    # Page management
    # ─────────────────────────────────────────────────────────────────────

    def _open_page(self) -> None:
        self._close_page()
        # Index is claimed before margins are resolved for it
        page_index = self._next_index
        self._next_index += 1
        self._spec = resolve(self.trim_size, page_index)
        self._placements = []
        self._cursor = self._spec.margins.top

    def _close_page(self) -> None:
        if self._spec is None or self._flow is None:
            return

        placements = self._placements
        if self._flow.vertical_center and placements:
            placements = self._center_vertically(placements)

        index = len(self.pages)
        numbered = self._flow.numbered and self.config.show_page_numbers
        self.pages.append(Page(
            index=index,
            kind=self._flow.kind,
            spec=self._spec,
            placements=tuple(placements),
            page_number=index + 1 if numbered else None,
            section_index=self._flow.section_index,
        ))
        self._spec = None

    def _center_vertically(self, placements: List[LinePlacement]) -> List[LinePlacement]:
        used = placements[-1].bottom - self._spec.margins.top
        shift = max(0.0, (self._content_bottom - self._spec.margins.top - used) / 2)
        return [
            LinePlacement(text=p.text, style=p.style, x=p.x, top=p.top + shift, height=p.height)
            for p in placements
        ]

    @property
    def _content_bottom(self) -> float:
        return self._spec.height - self._spec.margins.bottom - self.config.footer_reserve

    @property
    def _page_is_empty(self) -> bool:
        return not self._placements

    def finish(self) -> List[Page]:
        self._close_page()
        return self.pages

    # ─────────────────────────────────────────────────────────────────────
    # Placement
    # ─────────────────────────────────────────────────────────────────────

    def add_flow(self, flow: PageFlow) -> None:
        self._close_page()
        self._flow = flow
        self._open_page()
        for block in flow.blocks:
            self._add_block(block)

    def _add_block(self, block: RenderBlock) -> None:
        rows = self._measure(block)
        if not rows:
            return

        block_height = _stack_height(rows, at_page_top=self._page_is_empty)
        space_left = self._content_bottom - self._cursor

        if block.keep_together and block_height > space_left and not self._page_is_empty:
            self._open_page()
            block_height = _stack_height(rows, at_page_top=True)

        full_page = self._content_bottom - self._spec.margins.top
        if block.keep_together and block_height > full_page:
            self._warn(
                f"{block.kind} block overflows page {self._next_index}: "
                f"{block_height:.0f}pt needed, {full_page:.0f}pt available; splitting"
            )

        for row in rows:
            self._add_row(row)

    def _add_row(self, row: _Row) -> None:
        spacing = 0.0 if self._page_is_empty else row.space_before
        if self._cursor + spacing + row.height > self._content_bottom and not self._page_is_empty:
            self._open_page()
            spacing = 0.0

        top = self._cursor + spacing
        if top + row.height > self._content_bottom:
            self._warn(f"Line taller than page {self._next_index}: {row.height:.0f}pt")

        base_x = self._spec.margins.left + row.style.indent
        for fragment in row.fragments:
            x = base_x + fragment.x_offset
            if row.style.align == "center":
                text_width = stringWidth(fragment.text, row.style.font_name, row.style.font_size)
                x = self._spec.margins.left + (self._spec.content_width - text_width) / 2
            self._placements.append(LinePlacement(
                text=fragment.text,
                style=row.style,
                x=x,
                top=top + fragment.y_offset,
                height=row.style.leading,
            ))
        self._cursor = top + row.height + row.space_after

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    # ─────────────────────────────────────────────────────────────────────
    # Measurement
    # ─────────────────────────────────────────────────────────────────────

    def _measure(self, block: RenderBlock) -> List[_Row]:
        """Wrap every line of a block into rows."""
        width = self._spec.content_width
        rows: List[_Row] = []
        for line in block.lines:
            style = self.config.style(line.style)
            rows.extend(_measure_line(line, style, width))
        return rows


def _measure_line(line: TextLine, style: TextStyle, content_width: float) -> List[_Row]:
    available = content_width - style.indent

    if line.cells:
        return [_measure_cells(line.cells, style, available)]

    wrapped = wrap_text(line.text, style, available)
    rows = []
    for i, text in enumerate(wrapped):
        rows.append(_Row(
            fragments=(_Fragment(text, 0.0),),
            style=style,
            height=style.leading,
            space_before=style.space_before if i == 0 else 0.0,
            space_after=style.space_after if i == len(wrapped) - 1 else 0.0,
        ))
    return rows


def _measure_cells(cells: Tuple[str, ...], style: TextStyle, available: float) -> _Row:
    """
    Lay cells side by side as one row.

    Cells wrap inside their column; the row is as tall as its tallest cell.
    Columns beyond column_fractions share the remaining width equally.
    """
    fractions = list(style.column_fractions)
    if len(fractions) < len(cells):
        rest = max(0.0, 1.0 - sum(fractions))
        extra = len(cells) - len(fractions)
        fractions.extend([rest / extra] * extra)

    fragments: List[_Fragment] = []
    offset = 0.0
    max_lines = 1
    for cell, fraction in zip(cells, fractions):
        column_width = available * fraction
        wrapped = wrap_text(cell, style, column_width)
        max_lines = max(max_lines, len(wrapped))
        for i, text in enumerate(wrapped):
            fragments.append(_Fragment(text, offset, i * style.leading))
        offset += column_width

    return _Row(
        fragments=tuple(fragments),
        style=style,
        height=style.leading * max_lines,
        space_before=style.space_before,
        space_after=style.space_after,
    )


def wrap_text(text: str, style: TextStyle, width: float) -> List[str]:
    """
    Wrap text to a width using the style's font metrics.

    Explicit newlines start new lines. Empty text yields one empty line.

    Example:
        >>> wrap_text("a b c", TextStyle("body"), 1000)
        ['a b c']
    """
    lines: List[str] = []
    for segment in text.split("\n"):
        split = simpleSplit(segment, style.font_name, style.font_size, max(width, 1.0))
        lines.extend(split or [""])
    return lines or [""]


def _stack_height(rows: Sequence[_Row], *, at_page_top: bool) -> float:
    """Total height of rows placed consecutively."""
    total = 0.0
    for i, row in enumerate(rows):
        if i > 0 or not at_page_top:
            total += row.space_before
        total += row.height
        if i < len(rows) - 1:
            total += row.space_after
    return total
