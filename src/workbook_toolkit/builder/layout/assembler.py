"""
Module: builder.layout.assembler

Purpose:
    Build the page flows of a workbook in print order:
    title page, table of contents, one flow per section, and the
    optional answer key.

Key Functions:
    - assemble_flows(): All flows for a book
    - contents_entries(): Table of contents entries
    - build_answer_key_flow(): Answer key flow (None when disabled)

Dependencies:
    - builder.layout.exercises: render_exercise()
    - builder.layout.answers: extract_answer()
    - builder.layout.models: PageFlow, RenderBlock, TextLine

Used By:
    - builder.controller: compile_book()
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from workbook_toolkit.core.models.book import BookSection, GeneratedBook
from workbook_toolkit.core.models.config import BookConfig

from .answers import extract_answer
from .exercises import render_exercise
from .models import PageFlow, RenderBlock, TextLine

logger = logging.getLogger(__name__)

CONTENTS_TITLE = "Table of Contents"
ANSWER_KEY_TITLE = "Answer Key"

PAGE_TITLE = "title"
PAGE_CONTENTS = "contents"
PAGE_SECTION = "section"
PAGE_ANSWER_KEY = "answer_key"


def assemble_flows(book: GeneratedBook, *, rng: random.Random) -> List[PageFlow]:
    """
    Build every page flow of a book, in output order.

    Args:
        book: Book to lay out
        rng: Randomness source passed to the exercise renderer

    Returns:
        [title, contents, section..., answer key?]
    """
    flows = [
        build_title_flow(book.config),
        build_contents_flow(book),
    ]
    flows.extend(
        build_section_flow(section, i, rng=rng)
        for i, section in enumerate(book.sections)
    )

    answer_key = build_answer_key_flow(book)
    if answer_key is not None:
        flows.append(answer_key)

    logger.debug(f"Assembled {len(flows)} flows for {book.config.title!r}")
    return flows


def build_title_flow(config: BookConfig) -> PageFlow:
    """Centred title, "level | topic" subtitle and author line."""
    block = RenderBlock(kind="title", lines=(
        TextLine(config.title, style="book_title"),
        TextLine(f"{config.level.value} | {config.topic}", style="book_subtitle"),
        TextLine(config.author_name, style="author_name"),
    ))
    return PageFlow(kind=PAGE_TITLE, blocks=(block,), numbered=False, vertical_center=True)


def contents_entries(book: GeneratedBook) -> List[str]:
    """
    Table of contents entries: section titles, then "Answer Key" if enabled.

    Example:
        >>> contents_entries(book)
        ['Weather', 'Answer Key']
    """
    entries = [section.title for section in book.sections]
    if book.config.include_answer_key:
        entries.append(ANSWER_KEY_TITLE)
    return entries


def build_contents_flow(book: GeneratedBook) -> PageFlow:
    lines = [TextLine(CONTENTS_TITLE, style="toc_title")]
    lines.extend(TextLine(entry, style="toc_entry") for entry in contents_entries(book))
    return PageFlow(kind=PAGE_CONTENTS, blocks=(RenderBlock(kind="contents", lines=tuple(lines)),))


def build_section_flow(section: BookSection, section_index: int, *, rng: random.Random) -> PageFlow:
    """Section heading followed by each exercise block in order."""
    heading = [TextLine(section.title, style="section_title")]
    if section.description:
        heading.append(TextLine(section.description, style="section_description"))

    blocks = [RenderBlock(kind="heading", lines=tuple(heading))]
    blocks.extend(
        render_exercise(exercise, i, rng=rng)
        for i, exercise in enumerate(section.exercises)
    )
    return PageFlow(kind=PAGE_SECTION, blocks=tuple(blocks), section_index=section_index)


def build_answer_key_flow(book: GeneratedBook) -> Optional[PageFlow]:
    """
    Answer key flow, or None when the book has no answer key.

    Sections without any extractable answer get no header.
    """
    if not book.config.include_answer_key:
        return None

    blocks = [RenderBlock(kind="heading", lines=(TextLine(ANSWER_KEY_TITLE, style="answer_key_title"),))]
    blocks.extend(answer_section_blocks(book.sections))
    return PageFlow(kind=PAGE_ANSWER_KEY, blocks=tuple(blocks))


def answer_section_blocks(sections: Sequence[BookSection]) -> List[RenderBlock]:
    """
    Keep-together answer blocks, one per exercise that has an answer.

    A section's header rides in the block of its first answered
    exercise; sections with no answers get no blocks at all.
    """
    blocks = []
    for section in sections:
        header: Optional[TextLine] = TextLine(section.title, style="answer_section_title")
        for i, exercise in enumerate(section.exercises):
            answer = extract_answer(exercise)
            if answer is None:
                continue
            lines = [] if header is None else [header]
            header = None
            lines.append(TextLine(f"{i + 1}. {exercise.title}", style="answer_exercise_title"))
            lines.append(TextLine(answer, style="answer_text"))
            blocks.append(RenderBlock(kind="answers", lines=tuple(lines), keep_together=True))

        if header is not None:
            logger.debug(f"No answers for section {section.title!r}")
    return blocks
