"""
Module: builder

Purpose:
    Print layout compiler for generated workbooks.
    Turns a GeneratedBook into a paginated Document with trim-size page
    geometry, binding-mirrored margins and an optional answer key, and
    renders it to PDF.

Key Functions:
    - compile_book(): GeneratedBook -> Document (no I/O)
    - build_book(): Compile and render to a PDF file

Key Classes:
    - BuilderConfig: Configuration for building
    - LayoutConfig: Text styles and footer spacing
    - Document: Compiled pages

Dependencies:
    - reportlab: Font metrics and PDF generation
    - workbook_toolkit.core.models: Book and exercise models
"""

from .config import BuilderConfig
from .layout import Document, LayoutConfig
from .controller import compile_book, build_book, BuildResult, BuildError

__all__ = [
    # Config
    "BuilderConfig",
    "LayoutConfig",
    # Output
    "Document",
    # Controller
    "compile_book",
    "build_book",
    "BuildResult",
    "BuildError",
]
