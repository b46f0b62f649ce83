"""
Module: exercises

Purpose:
    Provides the exercise sum type - one frozen dataclass per exercise
    variant plus UnknownExercise for types this version does not know.
    Payload item fields are Optional because generated content may be
    partially formed; the renderer and answer extractor skip items whose
    required fields are missing.

Key Classes:
    - BaseExercise: Shared title/instructions
    - FillInBlankExercise, MultipleChoiceExercise, MatchingExercise,
      TrueFalseExercise, SentenceReorderExercise, ErrorCorrectionExercise,
      ReadingPassageExercise, ShortAnswerExercise, WordSearchExercise
    - UnknownExercise: Unrecognized type, header only
    - Exercise: Union of all of the above

Dependencies:
    - dataclasses (std)
    - .config.ExerciseType

Used By:
    - core.models.book.BookSection
    - builder.layout.exercises (rendering)
    - builder.layout.answers (answer extraction)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

from .config import ExerciseType


MULTIPLE_CHOICE_OPTION_COUNT = 4
DEFAULT_GRID_SIZE = 12


# ─────────────────────────────────────────────────────────────────────────────
# Payload Items
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BlankSentence:
    """Sentence containing a "___" marker and the word that fills it."""
    text: Optional[str]
    blank: Optional[str]
    hint: Optional[str] = None

    @property
    def is_printable(self) -> bool:
        return self.text is not None


@dataclass(frozen=True)
class ChoiceQuestion:
    """Multiple-choice question with exactly four options."""
    question: Optional[str]
    options: Tuple[str, ...]
    correct_index: Optional[int]

    @property
    def is_printable(self) -> bool:
        """True when the question and its four options can be printed."""
        return self.question is not None and len(self.options) == MULTIPLE_CHOICE_OPTION_COUNT

    @property
    def is_well_formed(self) -> bool:
        """True when the question is printable and has a valid correct index."""
        return (
            self.is_printable
            and self.correct_index is not None
            and 0 <= self.correct_index < MULTIPLE_CHOICE_OPTION_COUNT
        )


@dataclass(frozen=True)
class MatchingPair:
    left: Optional[str]
    right: Optional[str]

    @property
    def is_printable(self) -> bool:
        return self.left is not None


@dataclass(frozen=True)
class TrueFalseStatement:
    statement: Optional[str]
    is_true: Optional[bool]

    @property
    def is_printable(self) -> bool:
        return self.statement is not None


@dataclass(frozen=True)
class ReorderSentence:
    scrambled: Tuple[str, ...]
    correct: Optional[str]

    @property
    def is_printable(self) -> bool:
        return len(self.scrambled) > 0


@dataclass(frozen=True)
class CorrectionSentence:
    incorrect: Optional[str]
    correct: Optional[str]
    error_type: Optional[str]

    @property
    def is_printable(self) -> bool:
        return self.incorrect is not None


@dataclass(frozen=True)
class PassageQuestion:
    question: Optional[str]
    answer: Optional[str]

    @property
    def is_printable(self) -> bool:
        return self.question is not None


@dataclass(frozen=True)
class OpenQuestion:
    question: Optional[str]
    sample_answer: Optional[str]

    @property
    def is_printable(self) -> bool:
        return self.question is not None


# ─────────────────────────────────────────────────────────────────────────────
# Exercise Variants
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BaseExercise:
    """
    Fields shared by every exercise variant.

    Attributes:
        title: Exercise title shown in the content and the answer key
        instructions: Instructions printed under the title
    """

    title: str
    instructions: str

    type: ClassVar[Optional[ExerciseType]] = None

    @property
    def type_name(self) -> str:
        """Wire name of the exercise type."""
        return self.type.value if self.type is not None else ""


@dataclass(frozen=True)
class FillInBlankExercise(BaseExercise):
    sentences: Tuple[BlankSentence, ...] = ()

    type: ClassVar[ExerciseType] = ExerciseType.FILL_IN_BLANK


@dataclass(frozen=True)
class MultipleChoiceExercise(BaseExercise):
    questions: Tuple[ChoiceQuestion, ...] = ()

    type: ClassVar[ExerciseType] = ExerciseType.MULTIPLE_CHOICE


@dataclass(frozen=True)
class MatchingExercise(BaseExercise):
    pairs: Tuple[MatchingPair, ...] = ()

    type: ClassVar[ExerciseType] = ExerciseType.MATCHING


@dataclass(frozen=True)
class TrueFalseExercise(BaseExercise):
    statements: Tuple[TrueFalseStatement, ...] = ()

    type: ClassVar[ExerciseType] = ExerciseType.TRUE_FALSE


@dataclass(frozen=True)
class SentenceReorderExercise(BaseExercise):
    sentences: Tuple[ReorderSentence, ...] = ()

    type: ClassVar[ExerciseType] = ExerciseType.SENTENCE_REORDER


@dataclass(frozen=True)
class ErrorCorrectionExercise(BaseExercise):
    sentences: Tuple[CorrectionSentence, ...] = ()

    type: ClassVar[ExerciseType] = ExerciseType.ERROR_CORRECTION


@dataclass(frozen=True)
class ReadingPassageExercise(BaseExercise):
    passage: Optional[str] = None
    questions: Tuple[PassageQuestion, ...] = ()

    type: ClassVar[ExerciseType] = ExerciseType.READING_PASSAGE


@dataclass(frozen=True)
class ShortAnswerExercise(BaseExercise):
    questions: Tuple[OpenQuestion, ...] = ()

    type: ClassVar[ExerciseType] = ExerciseType.SHORT_ANSWER


@dataclass(frozen=True)
class WordSearchExercise(BaseExercise):
    """Vocabulary list for a word search; the grid is produced downstream."""

    words: Tuple[str, ...] = ()
    grid_size: int = DEFAULT_GRID_SIZE

    type: ClassVar[ExerciseType] = ExerciseType.WORD_SEARCH


@dataclass(frozen=True)
class UnknownExercise(BaseExercise):
    """
    Exercise whose type string is not recognized.

    Rendered as title and instructions only, never answered.
    """

    raw_type: str = ""

    @property
    def type_name(self) -> str:
        return self.raw_type


Exercise = Union[
    FillInBlankExercise,
    MultipleChoiceExercise,
    MatchingExercise,
    TrueFalseExercise,
    SentenceReorderExercise,
    ErrorCorrectionExercise,
    ReadingPassageExercise,
    ShortAnswerExercise,
    WordSearchExercise,
    UnknownExercise,
]

# ExerciseType -> variant class; must stay exhaustive over ExerciseType
EXERCISE_CLASSES = {
    cls.type: cls
    for cls in (
        FillInBlankExercise,
        MultipleChoiceExercise,
        MatchingExercise,
        TrueFalseExercise,
        SentenceReorderExercise,
        ErrorCorrectionExercise,
        ReadingPassageExercise,
        ShortAnswerExercise,
        WordSearchExercise,
    )
}
