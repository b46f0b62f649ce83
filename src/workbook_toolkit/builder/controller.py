"""
Module: builder.controller

Purpose:
    Orchestrate the workbook building pipeline.
    Assemble flows → Paginate → (Render)

Key Functions:
    - compile_book(): GeneratedBook -> Document, no I/O
    - build_book(): compile_book() plus PDF rendering to disk

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.layout: Assembly and pagination
    - builder.output: PDF rendering

Used By:
    - Callers holding a validated GeneratedBook
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from workbook_toolkit.common.labels import BOOK_TYPE_LABELS, CEFR_LABELS
from workbook_toolkit.core.models.book import GeneratedBook

from .config import BuilderConfig
from .layout import Document, LayoutConfig, assemble_flows, paginate
from .output import render_to_pdf, suggest_filename

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        pdf_path: Path to generated PDF
        document: Compiled document that was rendered
        page_count: Number of pages generated
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_book(book, BuilderConfig(output_dir=Path("output")))
        >>> print(f"Generated {result.page_count} pages at {result.pdf_path}")
    """
    pdf_path: Path
    document: Document
    page_count: int
    metadata: dict
    warnings: tuple[str, ...]


def compile_book(
    book: GeneratedBook,
    *,
    rng: Optional[random.Random] = None,
    layout: Optional[LayoutConfig] = None,
) -> Document:
    """
    Compile a book into a paginated document.

    Pure apart from the matching column shuffle: pass a seeded
    random.Random for reproducible output. Without one, a freshly seeded
    generator is created for this call only.

    Args:
        book: Validated book
        rng: Randomness source for matching exercises
        layout: Layout configuration

    Returns:
        Document with pages ordered title, contents, sections, answer key

    Example:
        >>> document = compile_book(book, rng=random.Random(3))
        >>> [p.kind for p in document.pages]
        ['title', 'contents', 'section', 'answer_key']
    """
    if rng is None:
        rng = random.Random()
    if layout is None:
        layout = LayoutConfig()

    config = book.config
    flows = assemble_flows(book, rng=rng)
    result = paginate(flows, config.trim_size, layout)

    logger.info(
        f"Compiled {config.title!r}: {len(book.sections)} sections, "
        f"{book.exercise_count} exercises, {result.page_count} pages"
    )

    return Document(
        pages=result.pages,
        title=config.title,
        author=config.author_name,
        subject=f"{BOOK_TYPE_LABELS[config.book_type]} ({CEFR_LABELS[config.level]})",
        warnings=result.warnings,
    )


def build_book(book: GeneratedBook, config: BuilderConfig) -> BuildResult:
    """
    Compile a book and render it to PDF.

    Pipeline:
    1. Compile the book into a Document
    2. Render the Document to <output_dir>/<filename>

    Args:
        book: Validated book
        config: Build configuration

    Returns:
        BuildResult with the PDF path and metadata

    Raises:
        BuildError: If the PDF cannot be written
    """
    start_time = time.perf_counter()
    logger.info(f"Starting build for {book.config.title!r} ({book.config.trim_size.value})")

    rng = random.Random(config.seed) if config.seed is not None else None
    document = compile_book(book, rng=rng, layout=config.layout)

    pdf_path = config.output_dir / (config.filename or suggest_filename(book.config.title))
    try:
        render_to_pdf(document, pdf_path, layout=config.layout)
    except OSError as e:
        raise BuildError(f"Could not write PDF to {pdf_path}: {e}") from e

    elapsed = time.perf_counter() - start_time
    metadata = {
        "title": book.config.title,
        "author": book.config.author_name,
        "trim_size": book.config.trim_size.value,
        "level": book.config.level.value,
        "sections": len(book.sections),
        "exercises": book.exercise_count,
        "include_answer_key": book.config.include_answer_key,
        "seed": config.seed,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "build_seconds": round(elapsed, 3),
    }

    logger.info(f"Build complete: {document.page_count} pages in {elapsed:.2f}s")

    return BuildResult(
        pdf_path=pdf_path,
        document=document,
        page_count=document.page_count,
        metadata=metadata,
        warnings=document.warnings,
    )
