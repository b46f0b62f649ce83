"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses for the render tree (blocks of text lines),
    resolved page geometry, positioned lines, pages and the final document.

Key Classes:
    - TextStyle: Font, spacing and alignment for one kind of line
    - TextLine: One paragraph (or one row of cells) in a render block
    - RenderBlock: Ordered lines produced for one exercise or heading
    - PageFlow: Blocks that start on a fresh page and flow onward
    - PageMargins / PrintSpec: Resolved physical page geometry
    - LinePlacement: A wrapped line positioned on a page
    - Page: One physical page
    - Document: Final compiled output

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.exercises: Creates RenderBlocks
    - builder.layout.assembler: Creates PageFlows
    - builder.layout.paginator: Creates Pages
    - builder.output.renderer: Draws Pages
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class TextStyle:
    """
    Visual style for a line (immutable).

    Attributes:
        name: Style key (e.g. "exercise_title")
        font_name: Standard PDF font name
        font_size: Font size in points
        leading: Line height in points
        color: Hex colour like "#1a1a1a"
        indent: Left indent in points
        space_before: Gap above the paragraph (dropped at top of page)
        space_after: Gap below the paragraph
        align: "left" or "center"
        rule_below: Draw a thin rule under the paragraph
        column_fractions: Cell widths as fractions of content width (cell rows only)
    """

    name: str
    font_name: str = "Helvetica"
    font_size: float = 11
    leading: float = 16.5
    color: str = "#1a1a1a"
    indent: float = 0
    space_before: float = 0
    space_after: float = 0
    align: str = "left"
    rule_below: bool = False
    column_fractions: Tuple[float, ...] = ()


@dataclass(frozen=True)
class TextLine:
    """
    One paragraph of a render block.

    Either plain text (wrapped to the content width) or a row of cells
    laid out side by side using the style's column_fractions.

    Example:
        >>> TextLine("1. The sky is blue.   True / False", style="item")
        >>> TextLine(style="matching_row", cells=("1. cat", "___", "A. dog"))
    """

    text: str = ""
    style: str = "body"
    cells: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RenderBlock:
    """
    Ordered lines for one logical unit (immutable).

    Attributes:
        kind: What produced the block ("exercise", "heading", "answers", ...)
        lines: Paragraphs in print order
        keep_together: Move the whole block to the next page if it does not fit
    """

    kind: str
    lines: Tuple[TextLine, ...]
    keep_together: bool = False

    @property
    def texts(self) -> Tuple[str, ...]:
        """Plain text of every line (cells joined by a space)."""
        return tuple(" ".join(line.cells) if line.cells else line.text for line in self.lines)


@dataclass(frozen=True)
class PageFlow:
    """
    A run of blocks that starts on a new physical page.

    Attributes:
        kind: Page kind ("title", "contents", "section", "answer_key")
        blocks: Blocks in order
        numbered: Whether pages of this flow show a page number
        vertical_center: Centre the content vertically (single-page flows)
        section_index: Index of the BookSection for section flows
    """

    kind: str
    blocks: Tuple[RenderBlock, ...]
    numbered: bool = True
    vertical_center: bool = False
    section_index: Optional[int] = None


@dataclass(frozen=True)
class PageMargins:
    """Resolved margins for one page, in points."""

    left: float
    right: float
    top: float
    bottom: float


@dataclass(frozen=True)
class PrintSpec:
    """
    Physical geometry of one page.

    Example:
        >>> spec = resolve(TrimSize.SIX_BY_NINE, 0)
        >>> spec.content_width
        342.0
    """

    width: float
    height: float
    margins: PageMargins

    @property
    def content_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.width - self.margins.left - self.margins.right

    @property
    def content_height(self) -> float:
        """Height available for content (excluding margins)."""
        return self.height - self.margins.top - self.margins.bottom


@dataclass(frozen=True)
class LinePlacement:
    """
    A single wrapped line positioned on a page.

    Coordinates are top-down from the page's top-left corner, in points.

    Attributes:
        text: Text to draw
        style: Style used to measure and draw it
        x: Left edge of the text
        top: Top of the line box
        height: Line box height (style leading)
    """

    text: str
    style: TextStyle
    x: float
    top: float
    height: float

    @property
    def bottom(self) -> float:
        """Bottom Y coordinate (top + height)."""
        return self.top + self.height


@dataclass(frozen=True)
class Page:
    """
    One physical output page.

    Attributes:
        index: Zero-based position in the page stream (drives margin parity)
        kind: Page kind inherited from its flow
        spec: Resolved size and margins
        placements: Positioned lines
        page_number: Printed page number, or None (title page)
        section_index: Index of the section for section pages
    """

    index: int
    kind: str
    spec: PrintSpec
    placements: Tuple[LinePlacement, ...]
    page_number: Optional[int] = None
    section_index: Optional[int] = None

    @property
    def texts(self) -> Tuple[str, ...]:
        """Text of every placed line, in placement order."""
        return tuple(p.text for p in self.placements)

    @property
    def text(self) -> str:
        """All placed text joined by newlines."""
        return "\n".join(self.texts)

    def texts_with_style(self, style_name: str) -> Tuple[str, ...]:
        return tuple(p.text for p in self.placements if p.style.name == style_name)

    @property
    def is_empty(self) -> bool:
        return len(self.placements) == 0


@dataclass(frozen=True)
class Document:
    """
    Compiled, paginated workbook.

    Pages are ordered title, contents, sections, then the optional
    answer key.

    Example:
        >>> document = compile_book(book)
        >>> document.page_count
        4
    """

    pages: Tuple[Page, ...]
    title: str
    author: str
    subject: str = ""
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def page_count(self) -> int:
        """Number of physical pages."""
        return len(self.pages)

    def pages_of_kind(self, kind: str) -> Tuple[Page, ...]:
        """All pages of the given kind, in order."""
        return tuple(p for p in self.pages if p.kind == kind)
