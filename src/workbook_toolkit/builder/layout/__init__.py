"""
Module: builder.layout

Purpose:
    Page layout and composition for workbook building.
    Converts a GeneratedBook into positioned physical pages.

Key Functions:
    - resolve(): Page size and parity-mirrored margins
    - render_exercise(): Exercise -> RenderBlock
    - extract_answer(): Exercise -> answer text
    - assemble_flows(): Title, contents, sections, answer key
    - paginate(): Flow blocks onto physical pages

Key Classes:
    - LayoutConfig: Text styles and footer spacing
    - PrintSpec, PageMargins: Resolved geometry
    - RenderBlock, TextLine: Render tree
    - Page, Document: Layout output

Dependencies:
    - reportlab: Font metrics for line wrapping
    - workbook_toolkit.core.models: GeneratedBook and exercises

Used By:
    - builder.controller: compile_book()
"""

from .config import LayoutConfig
from .models import (
    Document,
    LinePlacement,
    Page,
    PageFlow,
    PageMargins,
    PrintSpec,
    RenderBlock,
    TextLine,
    TextStyle,
)
from .print_spec import TRIM_SPECS, resolve
from .exercises import render_exercise
from .answers import extract_answer
from .assembler import assemble_flows, contents_entries
from .paginator import LayoutResult, paginate

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "Document",
    "LinePlacement",
    "Page",
    "PageFlow",
    "PageMargins",
    "PrintSpec",
    "RenderBlock",
    "TextLine",
    "TextStyle",
    "LayoutResult",
    # Functions
    "TRIM_SPECS",
    "resolve",
    "render_exercise",
    "extract_answer",
    "assemble_flows",
    "contents_entries",
    "paginate",
]
