"""
Module: common.labels

Purpose:
    Human-readable display labels for the closed enumerations.

Used By:
    - builder.layout.exercises: Exercise type label line
    - builder.layout.assembler: Title page subtitle
"""

from __future__ import annotations

from typing import Dict

from workbook_toolkit.core.models.config import BookType, CEFRLevel, ExerciseType


BOOK_TYPE_LABELS: Dict[BookType, str] = {
    BookType.GRAMMAR_WORKBOOK: "Grammar Workbook",
    BookType.VOCABULARY_BUILDER: "Vocabulary Builder",
    BookType.READING_COMPREHENSION: "Reading Comprehension",
    BookType.MIXED_SKILLS: "Mixed Skills",
}

CEFR_LABELS: Dict[CEFRLevel, str] = {
    CEFRLevel.A1: "A1 - Beginner",
    CEFRLevel.A2: "A2 - Elementary",
    CEFRLevel.B1: "B1 - Intermediate",
    CEFRLevel.B2: "B2 - Upper Intermediate",
    CEFRLevel.C1: "C1 - Advanced",
    CEFRLevel.C2: "C2 - Proficiency",
}

EXERCISE_TYPE_LABELS: Dict[ExerciseType, str] = {
    ExerciseType.FILL_IN_BLANK: "Fill in the Blank",
    ExerciseType.MULTIPLE_CHOICE: "Multiple Choice",
    ExerciseType.MATCHING: "Matching",
    ExerciseType.WORD_SEARCH: "Word Search",
    ExerciseType.SENTENCE_REORDER: "Sentence Reorder",
    ExerciseType.ERROR_CORRECTION: "Error Correction",
    ExerciseType.READING_PASSAGE: "Reading Passage",
    ExerciseType.TRUE_FALSE: "True / False",
    ExerciseType.SHORT_ANSWER: "Short Answer",
}


def exercise_type_label(type_name: str) -> str:
    """Display label for an exercise type, falling back to the raw name."""
    try:
        return EXERCISE_TYPE_LABELS[ExerciseType(type_name)]
    except ValueError:
        return type_name
