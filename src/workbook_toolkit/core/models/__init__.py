"""
Core Models Package

Immutable, validated data models for workbooks.

All models in this package are frozen dataclasses. Exercises form a closed
sum type: one class per ExerciseType, plus UnknownExercise for types added
upstream before this package learns about them.
"""

from .config import BookConfig, BookType, CEFRLevel, ExerciseType, TrimSize
from .exercises import (
    BaseExercise,
    BlankSentence,
    ChoiceQuestion,
    CorrectionSentence,
    ErrorCorrectionExercise,
    Exercise,
    FillInBlankExercise,
    MatchingExercise,
    MatchingPair,
    MultipleChoiceExercise,
    OpenQuestion,
    PassageQuestion,
    ReadingPassageExercise,
    ReorderSentence,
    SentenceReorderExercise,
    ShortAnswerExercise,
    TrueFalseExercise,
    TrueFalseStatement,
    UnknownExercise,
    WordSearchExercise,
)
from .book import BookSection, GeneratedBook

__all__ = [
    # Config
    "BookConfig",
    "BookType",
    "CEFRLevel",
    "ExerciseType",
    "TrimSize",
    # Exercises
    "BaseExercise",
    "Exercise",
    "FillInBlankExercise",
    "MultipleChoiceExercise",
    "MatchingExercise",
    "TrueFalseExercise",
    "SentenceReorderExercise",
    "ErrorCorrectionExercise",
    "ReadingPassageExercise",
    "ShortAnswerExercise",
    "WordSearchExercise",
    "UnknownExercise",
    # Items
    "BlankSentence",
    "ChoiceQuestion",
    "MatchingPair",
    "TrueFalseStatement",
    "ReorderSentence",
    "CorrectionSentence",
    "PassageQuestion",
    "OpenQuestion",
    # Book
    "BookSection",
    "GeneratedBook",
]
