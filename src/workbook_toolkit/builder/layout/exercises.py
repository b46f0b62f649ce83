"""
Module: builder.layout.exercises

Purpose:
    Turn one typed exercise into a RenderBlock.
    Every block starts with the numbered title, the type label and the
    instructions; the body depends on the exercise variant. Answers are
    never printed here (see answers.py).

Key Functions:
    - render_exercise(): Main entry point

Randomness:
    Matching exercises print their right-hand column from a shuffled copy
    of the pairs. This is the only non-deterministic step of the compiler;
    the caller supplies the random.Random instance.

Dependencies:
    - functools.singledispatch (std): One body renderer per variant
    - core.models.exercises: Exercise variants
    - common.labels: Type labels

Used By:
    - builder.layout.assembler: Section flows
"""

from __future__ import annotations

import logging
import random
from functools import singledispatch
from typing import List

from workbook_toolkit.common.labels import exercise_type_label
from workbook_toolkit.core.models.exercises import (
    BaseExercise,
    ErrorCorrectionExercise,
    Exercise,
    FillInBlankExercise,
    MatchingExercise,
    MultipleChoiceExercise,
    ReadingPassageExercise,
    SentenceReorderExercise,
    ShortAnswerExercise,
    TrueFalseExercise,
    WordSearchExercise,
)

from .models import RenderBlock, TextLine

logger = logging.getLogger(__name__)

BLANK_MARKER = "___"
PRINTED_BLANK = "________"
ANSWER_RULE = "_" * 47
OPTION_LETTERS = ("A", "B", "C", "D")
TRUE_FALSE_MARKER = "True / False"
WORD_SEARCH_PROMPT = "Find these words in the grid:"
WORD_SEARCH_NOTE = "(Word search grid will be generated in print version)"
WORD_SEARCH_COLUMNS = 3


def render_exercise(exercise: Exercise, index: int, *, rng: random.Random) -> RenderBlock:
    """
    Render one exercise.

    Args:
        exercise: Exercise to render
        index: Zero-based position of the exercise within its section
        rng: Randomness source for the matching column shuffle

    Returns:
        RenderBlock kept together on one page where possible

    Example:
        >>> block = render_exercise(true_false, 0, rng=random.Random(1))
        >>> block.texts[0]
        '1. Weather Facts'
    """
    lines: List[TextLine] = [
        TextLine(f"{index + 1}. {exercise.title}", style="exercise_title"),
        TextLine(exercise_type_label(exercise.type_name), style="exercise_type"),
        TextLine(exercise.instructions, style="instructions"),
    ]
    lines.extend(_render_body(exercise, rng))
    return RenderBlock(kind="exercise", lines=tuple(lines), keep_together=True)


@singledispatch
def _render_body(exercise: BaseExercise, rng: random.Random) -> List[TextLine]:
    """Unrecognized exercise types have no body."""
    logger.debug(f"No body renderer for exercise type {exercise.type_name!r}")
    return []


@_render_body.register
def _(exercise: FillInBlankExercise, rng: random.Random) -> List[TextLine]:
    lines = []
    for n, s in enumerate(exercise.sentences, start=1):
        if not s.is_printable:
            continue
        text = s.text.replace(BLANK_MARKER, PRINTED_BLANK, 1)
        hint = f" ({s.hint})" if s.hint else ""
        lines.append(TextLine(f"{n}. {text}{hint}", style="item"))
    return lines


@_render_body.register
def _(exercise: MultipleChoiceExercise, rng: random.Random) -> List[TextLine]:
    lines = []
    for n, q in enumerate(exercise.questions, start=1):
        # Letters A-D only make sense for exactly four options
        if not q.is_printable:
            logger.debug(f"Skipping malformed question {n} in {exercise.title!r}")
            continue
        lines.append(TextLine(f"{n}. {q.question}", style="item"))
        for letter, option in zip(OPTION_LETTERS, q.options):
            lines.append(TextLine(f"{letter}) {option}", style="option"))
    return lines


@_render_body.register
def _(exercise: MatchingExercise, rng: random.Random) -> List[TextLine]:
    # Independent shuffle of a copy; the exercise itself is never touched
    shuffled = rng.sample(exercise.pairs, len(exercise.pairs))
    lines = []
    for n, (pair, right_pair) in enumerate(zip(exercise.pairs, shuffled), start=1):
        if not pair.is_printable:
            continue
        letter = column_label(n)
        lines.append(TextLine(
            style="matching_row",
            cells=(f"{n}. {pair.left}", BLANK_MARKER, f"{letter}. {right_pair.right or ''}"),
        ))
    return lines


@_render_body.register
def _(exercise: TrueFalseExercise, rng: random.Random) -> List[TextLine]:
    return [
        TextLine(f"{n}. {s.statement}   {TRUE_FALSE_MARKER}", style="item")
        for n, s in enumerate(exercise.statements, start=1)
        if s.is_printable
    ]


@_render_body.register
def _(exercise: SentenceReorderExercise, rng: random.Random) -> List[TextLine]:
    lines = []
    for n, s in enumerate(exercise.sentences, start=1):
        if not s.is_printable:
            continue
        lines.append(TextLine(f"{n}. {' / '.join(s.scrambled)}", style="item"))
        lines.append(TextLine(ANSWER_RULE, style="answer_rule"))
    return lines


@_render_body.register
def _(exercise: ErrorCorrectionExercise, rng: random.Random) -> List[TextLine]:
    lines = []
    for n, s in enumerate(exercise.sentences, start=1):
        if not s.is_printable:
            continue
        lines.append(TextLine(f"{n}. {s.incorrect}", style="item"))
        lines.append(TextLine(f"Corrected: {ANSWER_RULE}", style="answer_rule"))
    return lines


@_render_body.register
def _(exercise: ReadingPassageExercise, rng: random.Random) -> List[TextLine]:
    lines = []
    if exercise.passage:
        lines.append(TextLine(exercise.passage, style="passage"))
    for n, q in enumerate(exercise.questions, start=1):
        if not q.is_printable:
            continue
        lines.append(TextLine(f"{n}. {q.question}", style="item"))
        lines.append(TextLine(ANSWER_RULE, style="answer_rule"))
    return lines


@_render_body.register
def _(exercise: ShortAnswerExercise, rng: random.Random) -> List[TextLine]:
    lines = []
    for n, q in enumerate(exercise.questions, start=1):
        if not q.is_printable:
            continue
        lines.append(TextLine(f"{n}. {q.question}", style="item"))
        lines.append(TextLine(ANSWER_RULE, style="answer_rule"))
        lines.append(TextLine(ANSWER_RULE, style="answer_rule"))
    return lines


@_render_body.register
def _(exercise: WordSearchExercise, rng: random.Random) -> List[TextLine]:
    if not exercise.words:
        return []
    bullets = [f"• {w}" for w in exercise.words]
    lines = [TextLine(WORD_SEARCH_PROMPT, style="prompt")]
    for start in range(0, len(bullets), WORD_SEARCH_COLUMNS):
        lines.append(TextLine(style="word_list", cells=tuple(bullets[start:start + WORD_SEARCH_COLUMNS])))
    lines.append(TextLine(WORD_SEARCH_NOTE, style="note"))
    return lines


def column_label(n: int) -> str:
    """
    Letter label for the n-th (1-based) matching row: A..Z, then AA, AB, ...

    Example:
        >>> [column_label(n) for n in (1, 26, 27, 28)]
        ['A', 'Z', 'AA', 'AB']
    """
    label = ""
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label
