"""
Module: builder.output

Purpose:
    PDF rendering and output naming for the workbook builder.
    Converts a compiled Document to PDF using ReportLab.

Key Functions:
    - render_to_pdf(): Render document to a PDF file
    - render_to_bytes(): Render document to PDF bytes
    - suggest_filename(): Download name from the book title

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: Document

Used By:
    - builder.controller: Pipeline orchestration
"""

from .renderer import render_to_pdf, render_to_bytes
from .naming import suggest_filename

__all__ = [
    "render_to_pdf",
    "render_to_bytes",
    "suggest_filename",
]
