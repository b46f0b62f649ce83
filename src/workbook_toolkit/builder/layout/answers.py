"""
Module: builder.layout.answers

Purpose:
    Extract the canonical answer text for an exercise, independent of how
    the exercise is rendered. Matching answers always use the true input
    pairing, never the shuffled display order.

Key Functions:
    - extract_answer(): Answer text, or None when there is nothing to extract

Behaviour:
    - Items the renderer skips (is_printable is False) or that lack an
      answer field are skipped; numbering is kept
    - An exercise with no usable items yields None
    - Word searches and unrecognized types yield None
    - Never raises for malformed content

Dependencies:
    - functools.singledispatch (std)
    - core.models.exercises: Exercise variants

Used By:
    - builder.layout.assembler: Answer key flow
"""

from __future__ import annotations

from functools import singledispatch
from typing import Iterable, Optional, Tuple

from workbook_toolkit.core.models.exercises import (
    BaseExercise,
    ErrorCorrectionExercise,
    FillInBlankExercise,
    MatchingExercise,
    MultipleChoiceExercise,
    ReadingPassageExercise,
    SentenceReorderExercise,
    ShortAnswerExercise,
    TrueFalseExercise,
)

from .exercises import OPTION_LETTERS

INLINE_SEPARATOR = "  "
LINE_SEPARATOR = "\n"
PAIR_ARROW = "->"


def _join(entries: Iterable[Tuple[int, Optional[str]]], separator: str) -> Optional[str]:
    """Join numbered answers, dropping missing ones; None if nothing remains."""
    parts = [f"{n}. {answer}" for n, answer in entries if answer is not None]
    return separator.join(parts) if parts else None


@singledispatch
def extract_answer(exercise: BaseExercise) -> Optional[str]:
    """
    Extract the answer text for an exercise.

    Args:
        exercise: Exercise to summarise

    Returns:
        Answer text like "1. C  2. A", or None

    Example:
        >>> extract_answer(multiple_choice)
        '1. C'
    """
    return None


@extract_answer.register
def _(exercise: FillInBlankExercise) -> Optional[str]:
    return _join(
        ((n, s.blank if s.is_printable else None) for n, s in enumerate(exercise.sentences, start=1)),
        INLINE_SEPARATOR,
    )


@extract_answer.register
def _(exercise: MultipleChoiceExercise) -> Optional[str]:
    return _join(
        (
            (n, OPTION_LETTERS[q.correct_index] if q.is_well_formed else None)
            for n, q in enumerate(exercise.questions, start=1)
        ),
        INLINE_SEPARATOR,
    )


@extract_answer.register
def _(exercise: TrueFalseExercise) -> Optional[str]:
    def verdict(s) -> Optional[str]:
        if not s.is_printable or s.is_true is None:
            return None
        return "True" if s.is_true else "False"

    return _join(
        ((n, verdict(s)) for n, s in enumerate(exercise.statements, start=1)),
        INLINE_SEPARATOR,
    )


@extract_answer.register
def _(exercise: SentenceReorderExercise) -> Optional[str]:
    return _join(
        ((n, s.correct if s.is_printable else None) for n, s in enumerate(exercise.sentences, start=1)),
        LINE_SEPARATOR,
    )


@extract_answer.register
def _(exercise: ErrorCorrectionExercise) -> Optional[str]:
    def corrected(s) -> Optional[str]:
        if not s.is_printable or s.correct is None:
            return None
        return f"{s.correct} ({s.error_type})" if s.error_type else s.correct

    return _join(
        ((n, corrected(s)) for n, s in enumerate(exercise.sentences, start=1)),
        LINE_SEPARATOR,
    )


@extract_answer.register
def _(exercise: ReadingPassageExercise) -> Optional[str]:
    return _join(
        ((n, q.answer if q.is_printable else None) for n, q in enumerate(exercise.questions, start=1)),
        LINE_SEPARATOR,
    )


@extract_answer.register
def _(exercise: MatchingExercise) -> Optional[str]:
    # Pairs the renderer skipped have no row to answer
    return _join(
        (
            (n, f"{p.left} {PAIR_ARROW} {p.right}" if p.is_printable and p.right is not None else None)
            for n, p in enumerate(exercise.pairs, start=1)
        ),
        INLINE_SEPARATOR,
    )


@extract_answer.register
def _(exercise: ShortAnswerExercise) -> Optional[str]:
    return _join(
        ((n, q.sample_answer if q.is_printable else None) for n, q in enumerate(exercise.questions, start=1)),
        LINE_SEPARATOR,
    )
