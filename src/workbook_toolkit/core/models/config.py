"""
Module: config

Purpose:
    Provides the BookConfig dataclass and the closed enumerations it is
    built from. BookConfig is validated on construction, so an invalid
    trim size, level or length never reaches the layout compiler.

Key Classes:
    - TrimSize: Physical page identifier ("6x9", "8.5x11")
    - CEFRLevel: Six difficulty tiers (A1-C2)
    - BookType: Kind of workbook
    - ExerciseType: The nine exercise variants
    - BookConfig: Immutable book configuration

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.book.GeneratedBook
    - core.utils.serialization
    - builder.layout.print_spec
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class TrimSize(str, Enum):
    """Physical trim size of the printed book."""

    SIX_BY_NINE = "6x9"
    LETTER = "8.5x11"


class CEFRLevel(str, Enum):
    """CEFR difficulty tier."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class BookType(str, Enum):
    """Kind of workbook being produced."""

    GRAMMAR_WORKBOOK = "grammar_workbook"
    VOCABULARY_BUILDER = "vocabulary_builder"
    READING_COMPREHENSION = "reading_comprehension"
    MIXED_SKILLS = "mixed_skills"


class ExerciseType(str, Enum):
    """Closed set of exercise variants."""

    FILL_IN_BLANK = "fill_in_blank"
    MULTIPLE_CHOICE = "multiple_choice"
    MATCHING = "matching"
    WORD_SEARCH = "word_search"
    SENTENCE_REORDER = "sentence_reorder"
    ERROR_CORRECTION = "error_correction"
    READING_PASSAGE = "reading_passage"
    TRUE_FALSE = "true_false"
    SHORT_ANSWER = "short_answer"


DEFAULT_TRIM_SIZE = TrimSize.LETTER


@dataclass(frozen=True)
class BookConfig:
    """
    Book configuration (immutable).

    page_count and exercise_types only steer content generation upstream;
    the layout compiler reads title, level, topic, trim_size,
    include_answer_key and author_name.

    Attributes:
        title: Book title (3-100 chars)
        book_type: Kind of workbook
        level: CEFR difficulty tier
        topic: Topic of the book (3-200 chars)
        page_count: Advisory page count (20-200)
        trim_size: Physical page size
        exercise_types: Exercise variants requested (2-10 entries)
        include_answer_key: Whether to append an answer key
        author_name: Author line for the title page (1-100 chars)

    Example:
        >>> config = BookConfig(
        ...     title="English Grammar Practice",
        ...     book_type=BookType.GRAMMAR_WORKBOOK,
        ...     level=CEFRLevel.A2,
        ...     topic="Travel",
        ...     page_count=40,
        ...     exercise_types=(ExerciseType.FILL_IN_BLANK, ExerciseType.MATCHING),
        ...     author_name="Jane Doe",
        ... )
        >>> config.trim_size
        <TrimSize.LETTER: '8.5x11'>
    """

    title: str
    book_type: BookType
    level: CEFRLevel
    topic: str
    page_count: int
    exercise_types: Tuple[ExerciseType, ...]
    author_name: str
    trim_size: TrimSize = DEFAULT_TRIM_SIZE
    include_answer_key: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # Coerce wire strings to enums so callers may pass either
        object.__setattr__(self, "book_type", _coerce(BookType, self.book_type, "book_type"))
        object.__setattr__(self, "level", _coerce(CEFRLevel, self.level, "level"))
        object.__setattr__(self, "trim_size", _coerce(TrimSize, self.trim_size, "trim_size"))
        object.__setattr__(
            self,
            "exercise_types",
            tuple(_coerce(ExerciseType, t, "exercise_types") for t in self.exercise_types),
        )

        _check_length("title", self.title, 3, 100)
        _check_length("topic", self.topic, 3, 200)
        _check_length("author_name", self.author_name, 1, 100)

        if isinstance(self.page_count, bool) or not isinstance(self.page_count, int):
            raise ValueError(f"page_count must be an integer: {self.page_count!r}")
        if not 20 <= self.page_count <= 200:
            raise ValueError(f"page_count must be between 20 and 200: {self.page_count}")

        if not 2 <= len(self.exercise_types) <= 10:
            raise ValueError(
                f"exercise_types must have 2-10 entries: {len(self.exercise_types)}"
            )
        if not isinstance(self.include_answer_key, bool):
            raise ValueError(
                f"include_answer_key must be a boolean: {self.include_answer_key!r}"
            )


def _coerce(enum_cls, value, field_name: str):
    """Convert a wire string to its enum member."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"Invalid {field_name}: {value!r} (expected one of {allowed})") from None


def _check_length(field_name: str, value: str, minimum: int, maximum: int) -> None:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string: {value!r}")
    if not minimum <= len(value) <= maximum:
        raise ValueError(
            f"{field_name} must be {minimum}-{maximum} characters: {len(value)}"
        )
