"""
Serialization Utilities

Converts generated-book JSON (camelCase keys, as produced by the content
generation service) to and from the core models.

- Config and section envelopes are strict: BookConfig validates itself.
- Exercise payloads are lenient: a missing or mistyped item field becomes
  None, a non-list collection becomes empty, and an unrecognized exercise
  type becomes UnknownExercise. Nothing in a payload raises.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from ..models.book import BookSection, GeneratedBook
from ..models.config import BookConfig, DEFAULT_TRIM_SIZE, ExerciseType
from ..models.exercises import (
    DEFAULT_GRID_SIZE,
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
from ..schemas.validator import validate_book

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Book Serialization
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_book(data: dict[str, Any], *, validate: bool = True) -> GeneratedBook:
    """
    Deserialize a GeneratedBook from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the schema first (strict)

    Returns:
        GeneratedBook instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If the config cannot be constructed
    """
    if validate:
        validate_book(data, strict=True)

    config = _deserialize_config(data["config"])
    sections = tuple(_deserialize_section(s) for s in data.get("sections", []))
    return GeneratedBook(config=config, sections=sections)


def serialize_book(book: GeneratedBook) -> dict[str, Any]:
    """
    Serialize a GeneratedBook to a dictionary with camelCase keys.

    The output round-trips through deserialize_book().
    """
    c = book.config
    return {
        "config": {
            "title": c.title,
            "bookType": c.book_type.value,
            "level": c.level.value,
            "topic": c.topic,
            "pageCount": c.page_count,
            "trimSize": c.trim_size.value,
            "exerciseTypes": [t.value for t in c.exercise_types],
            "includeAnswerKey": c.include_answer_key,
            "authorName": c.author_name,
        },
        "sections": [_serialize_section(s) for s in book.sections],
    }


def load_book_json(path: Path, *, validate: bool = True) -> GeneratedBook:
    """Load a GeneratedBook from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return deserialize_book(data, validate=validate)


def save_book_json(book: GeneratedBook, path: Path) -> None:
    """Save a GeneratedBook to a JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_book(book), f, indent=2, ensure_ascii=False)


# ─────────────────────────────────────────────────────────────────────────────
# Config / Section
# ─────────────────────────────────────────────────────────────────────────────

def _deserialize_config(data: dict[str, Any]) -> BookConfig:
    return BookConfig(
        title=data["title"],
        book_type=data["bookType"],
        level=data["level"],
        topic=data["topic"],
        page_count=data["pageCount"],
        exercise_types=tuple(data["exerciseTypes"]),
        author_name=data["authorName"],
        trim_size=data.get("trimSize", DEFAULT_TRIM_SIZE.value),
        include_answer_key=data.get("includeAnswerKey", True),
    )


def _deserialize_section(data: dict[str, Any]) -> BookSection:
    exercises = tuple(_deserialize_exercise(e) for e in data.get("exercises", []))
    return BookSection(
        title=data["title"],
        exercises=exercises,
        description=data.get("description") or None,
    )


def _serialize_section(section: BookSection) -> dict[str, Any]:
    d: dict[str, Any] = {
        "title": section.title,
        "exercises": [_serialize_exercise(e) for e in section.exercises],
    }
    if section.description:
        d["description"] = section.description
    return d


# ─────────────────────────────────────────────────────────────────────────────
# Exercises
# ─────────────────────────────────────────────────────────────────────────────

def _deserialize_exercise(data: dict[str, Any]) -> Exercise:
    """Deserialize one exercise, degrading malformed payloads."""
    raw_type = data.get("type", "")
    title = _text(data.get("title")) or ""
    instructions = _text(data.get("instructions")) or ""
    content = data.get("content")
    if not isinstance(content, dict):
        logger.debug(f"Exercise {title!r} has no content object")
        content = {}

    try:
        exercise_type = ExerciseType(raw_type)
    except ValueError:
        logger.warning(f"Unrecognized exercise type {raw_type!r} in {title!r}; rendering header only")
        return UnknownExercise(title=title, instructions=instructions, raw_type=str(raw_type))

    parser = _PARSERS[exercise_type]
    return parser(title, instructions, content)


def _parse_fill_in_blank(title: str, instructions: str, c: dict) -> Exercise:
    return FillInBlankExercise(
        title=title,
        instructions=instructions,
        sentences=_items(c.get("sentences"), lambda s: BlankSentence(
            text=_text(s.get("text")),
            blank=_text(s.get("blank")),
            hint=_text(s.get("hint")),
        )),
    )


def _parse_multiple_choice(title: str, instructions: str, c: dict) -> Exercise:
    return MultipleChoiceExercise(
        title=title,
        instructions=instructions,
        questions=_items(c.get("questions"), lambda q: ChoiceQuestion(
            question=_text(q.get("question")),
            options=_strings(q.get("options")),
            correct_index=_int(q.get("correctIndex")),
        )),
    )


def _parse_matching(title: str, instructions: str, c: dict) -> Exercise:
    return MatchingExercise(
        title=title,
        instructions=instructions,
        pairs=_items(c.get("pairs"), lambda p: MatchingPair(
            left=_text(p.get("left")),
            right=_text(p.get("right")),
        )),
    )


def _parse_true_false(title: str, instructions: str, c: dict) -> Exercise:
    return TrueFalseExercise(
        title=title,
        instructions=instructions,
        statements=_items(c.get("statements"), lambda s: TrueFalseStatement(
            statement=_text(s.get("statement")),
            is_true=s.get("isTrue") if isinstance(s.get("isTrue"), bool) else None,
        )),
    )


def _parse_sentence_reorder(title: str, instructions: str, c: dict) -> Exercise:
    return SentenceReorderExercise(
        title=title,
        instructions=instructions,
        sentences=_items(c.get("sentences"), lambda s: ReorderSentence(
            scrambled=_strings(s.get("scrambled")),
            correct=_text(s.get("correct")),
        )),
    )


def _parse_error_correction(title: str, instructions: str, c: dict) -> Exercise:
    return ErrorCorrectionExercise(
        title=title,
        instructions=instructions,
        sentences=_items(c.get("sentences"), lambda s: CorrectionSentence(
            incorrect=_text(s.get("incorrect")),
            correct=_text(s.get("correct")),
            error_type=_text(s.get("errorType")),
        )),
    )


def _parse_reading_passage(title: str, instructions: str, c: dict) -> Exercise:
    return ReadingPassageExercise(
        title=title,
        instructions=instructions,
        passage=_text(c.get("passage")),
        questions=_items(c.get("questions"), lambda q: PassageQuestion(
            question=_text(q.get("question")),
            answer=_text(q.get("answer")),
        )),
    )


def _parse_short_answer(title: str, instructions: str, c: dict) -> Exercise:
    return ShortAnswerExercise(
        title=title,
        instructions=instructions,
        questions=_items(c.get("questions"), lambda q: OpenQuestion(
            question=_text(q.get("question")),
            sample_answer=_text(q.get("sampleAnswer")),
        )),
    )


def _parse_word_search(title: str, instructions: str, c: dict) -> Exercise:
    grid_size = _int(c.get("gridSize"))
    return WordSearchExercise(
        title=title,
        instructions=instructions,
        words=_strings(c.get("words")),
        grid_size=grid_size if grid_size is not None else DEFAULT_GRID_SIZE,
    )


_PARSERS: dict[ExerciseType, Callable[[str, str, dict], Exercise]] = {
    ExerciseType.FILL_IN_BLANK: _parse_fill_in_blank,
    ExerciseType.MULTIPLE_CHOICE: _parse_multiple_choice,
    ExerciseType.MATCHING: _parse_matching,
    ExerciseType.TRUE_FALSE: _parse_true_false,
    ExerciseType.SENTENCE_REORDER: _parse_sentence_reorder,
    ExerciseType.ERROR_CORRECTION: _parse_error_correction,
    ExerciseType.READING_PASSAGE: _parse_reading_passage,
    ExerciseType.SHORT_ANSWER: _parse_short_answer,
    ExerciseType.WORD_SEARCH: _parse_word_search,
}


def _serialize_exercise(exercise: Exercise) -> dict[str, Any]:
    """Serialize one exercise back to its wire shape."""
    d: dict[str, Any] = {
        "type": exercise.type_name,
        "title": exercise.title,
        "instructions": exercise.instructions,
    }

    if isinstance(exercise, FillInBlankExercise):
        content = {"sentences": [
            _compact({"text": s.text, "blank": s.blank, "hint": s.hint})
            for s in exercise.sentences
        ]}
    elif isinstance(exercise, MultipleChoiceExercise):
        content = {"questions": [
            _compact({"question": q.question, "options": list(q.options), "correctIndex": q.correct_index})
            for q in exercise.questions
        ]}
    elif isinstance(exercise, MatchingExercise):
        content = {"pairs": [_compact({"left": p.left, "right": p.right}) for p in exercise.pairs]}
    elif isinstance(exercise, TrueFalseExercise):
        content = {"statements": [
            _compact({"statement": s.statement, "isTrue": s.is_true}) for s in exercise.statements
        ]}
    elif isinstance(exercise, SentenceReorderExercise):
        content = {"sentences": [
            _compact({"scrambled": list(s.scrambled), "correct": s.correct}) for s in exercise.sentences
        ]}
    elif isinstance(exercise, ErrorCorrectionExercise):
        content = {"sentences": [
            _compact({"incorrect": s.incorrect, "correct": s.correct, "errorType": s.error_type})
            for s in exercise.sentences
        ]}
    elif isinstance(exercise, ReadingPassageExercise):
        content = _compact({
            "passage": exercise.passage,
            "questions": [_compact({"question": q.question, "answer": q.answer}) for q in exercise.questions],
        })
    elif isinstance(exercise, ShortAnswerExercise):
        content = {"questions": [
            _compact({"question": q.question, "sampleAnswer": q.sample_answer}) for q in exercise.questions
        ]}
    elif isinstance(exercise, WordSearchExercise):
        content = {"words": list(exercise.words), "gridSize": exercise.grid_size}
    else:
        content = {}

    d["content"] = content
    return d


# ─────────────────────────────────────────────────────────────────────────────
# Lenient field readers
# ─────────────────────────────────────────────────────────────────────────────

def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _strings(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(v for v in value if isinstance(v, str))


def _items(value: Any, build: Callable[[dict], Any]) -> tuple:
    """Build one item per dict entry; non-dict entries become empty items."""
    if not isinstance(value, list):
        return ()
    return tuple(build(v if isinstance(v, dict) else {}) for v in value)


def _compact(d: dict[str, Any]) -> dict[str, Any]:
    """Drop None values so optional fields are omitted from JSON."""
    return {k: v for k, v in d.items() if v is not None}
