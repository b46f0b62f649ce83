"""
Module: book

Purpose:
    Provides BookSection and GeneratedBook - the complete, read-only input
    of the layout compiler.

Key Classes:
    - BookSection: Titled, ordered group of exercises
    - GeneratedBook: Config plus ordered sections

Dependencies:
    - dataclasses (std)
    - .config.BookConfig
    - .exercises.Exercise

Used By:
    - core.utils.serialization
    - builder.controller.compile_book
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .config import BookConfig
from .exercises import Exercise


@dataclass(frozen=True)
class BookSection:
    """
    A section of the workbook (immutable).

    Exercise order is significant and preserved into the output.

    Attributes:
        title: Section title (also the table of contents entry)
        exercises: Ordered exercises
        description: Optional text printed under the title
    """

    title: str
    exercises: Tuple[Exercise, ...] = ()
    description: Optional[str] = None

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)


@dataclass(frozen=True)
class GeneratedBook:
    """
    A generated workbook: configuration plus ordered sections.

    Example:
        >>> book = GeneratedBook(config=config, sections=(section,))
        >>> book.exercise_count
        3
    """

    config: BookConfig
    sections: Tuple[BookSection, ...] = ()

    @property
    def exercise_count(self) -> int:
        """Total number of exercises across all sections."""
        return sum(s.exercise_count for s in self.sections)
