"""
Module: builder.output.renderer

Purpose:
    Render a compiled Document to PDF using ReportLab.
    Each Page becomes one PDF page at its resolved trim size, with every
    LinePlacement drawn where the paginator put it and the page number
    centred in the footer.

Key Functions:
    - render_to_pdf(): Write a PDF file
    - render_to_bytes(): Return the PDF as bytes

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: Document, Page, LinePlacement

Used By:
    - builder.controller: build_book()
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from reportlab.lib.colors import HexColor
from reportlab.pdfgen import canvas

from workbook_toolkit.builder.layout.config import LayoutConfig
from workbook_toolkit.builder.layout.models import Document, LinePlacement, Page

logger = logging.getLogger(__name__)

RULE_WIDTH = 0.5
RULE_COLOR = "#dddddd"
RULE_GAP = 2
# Fraction of the font size that sits below the baseline
DESCENT_RATIO = 0.2


def _get_creator() -> str:
    """Creator string with the current version number."""
    from workbook_toolkit import __version__
    return f"Workbook Toolkit v{__version__}"


def render_to_pdf(
    document: Document,
    output_path: Path,
    *,
    layout: Optional[LayoutConfig] = None,
) -> None:
    """
    Render a document to a PDF file.

    Args:
        document: Compiled document
        output_path: Path to write PDF
        layout: Layout configuration (page number style and position)

    Raises:
        OSError: If the PDF cannot be written

    Example:
        >>> render_to_pdf(document, Path("output/english-grammar.pdf"))
    """
    if document.page_count == 0:
        logger.warning("Empty document, creating empty PDF")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    _render(document, str(output_path), layout or LayoutConfig())

    logger.info(f"Rendered {document.page_count} pages to {output_path}")


def render_to_bytes(document: Document, *, layout: Optional[LayoutConfig] = None) -> bytes:
    """Render a document to PDF bytes in memory."""
    buf = io.BytesIO()
    _render(document, buf, layout or LayoutConfig())
    return buf.getvalue()


def _render(document: Document, target: Union[str, BinaryIO], layout: LayoutConfig) -> None:
    first = document.pages[0].spec if document.pages else None
    pagesize = (first.width, first.height) if first else (612, 792)

    c = canvas.Canvas(target, pagesize=pagesize)
    c.setTitle(document.title)
    c.setAuthor(document.author)
    c.setSubject(document.subject)
    c.setCreator(_get_creator())

    for page in document.pages:
        c.setPageSize((page.spec.width, page.spec.height))
        _render_page(c, page, layout)
        c.showPage()

    c.save()


def _render_page(c: canvas.Canvas, page: Page, layout: LayoutConfig) -> None:
    """
    Render a single page to the canvas.

    Args:
        c: ReportLab canvas
        page: Page with placements
        layout: Layout configuration for the footer
    """
    for placement in page.placements:
        _draw_placement(c, placement, page)

    if page.page_number is not None:
        _draw_page_number(c, page, layout)


def _draw_placement(c: canvas.Canvas, placement: LinePlacement, page: Page) -> None:
    """Draw one line of text, plus its rule if the style has one."""
    style = placement.style
    y_pt = _baseline_y(page.spec.height, placement)

    c.saveState()
    c.setFont(style.font_name, style.font_size)
    c.setFillColor(HexColor(style.color))
    c.drawString(placement.x, y_pt, placement.text)

    if style.rule_below:
        rule_y = page.spec.height - placement.bottom - RULE_GAP
        c.setStrokeColor(HexColor(RULE_COLOR))
        c.setLineWidth(RULE_WIDTH)
        c.line(
            page.spec.margins.left,
            rule_y,
            page.spec.width - page.spec.margins.right,
            rule_y,
        )
    c.restoreState()


def _draw_page_number(c: canvas.Canvas, page: Page, layout: LayoutConfig) -> None:
    """Draw the page number centred in the footer area."""
    style = layout.style("page_number")
    text = str(page.page_number)

    c.saveState()
    c.setFont(style.font_name, style.font_size)
    c.setFillColor(HexColor(style.color))
    c.drawCentredString(page.spec.width / 2, layout.page_number_offset, text)
    c.restoreState()


def _baseline_y(page_height_pt: float, placement: LinePlacement) -> float:
    """
    Convert a top-down line box to a bottom-up PDF baseline.

    The glyphs are centred vertically in the line box.
    """
    font_size = placement.style.font_size
    baseline_from_top = (
        placement.top
        + (placement.height + font_size) / 2
        - font_size * DESCENT_RATIO
    )
    return page_height_pt - baseline_from_top
