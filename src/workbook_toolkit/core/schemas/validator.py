"""
Schema Validation Utilities

Validates generated-book JSON before it is turned into models.

This is the construction-time gate: enum membership, length limits and
the required top-level structure are checked here (and again by
BookConfig), so the layout compiler can treat its input as valid.
Exercise payloads are deliberately not validated beyond their envelope;
partially formed content is degraded later instead of rejected.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema


CONFIG_REQUIRED = (
    "title", "bookType", "level", "topic", "pageCount", "exerciseTypes", "authorName",
)


class ValidationError(Exception):
    """Raised when book data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


@lru_cache(maxsize=None)
def load_schema(name: str = "book") -> dict:
    """Load a schema from the schemas directory."""
    schema_path = Path(__file__).parent / f"{name}.schema.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_book(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate generated-book data.

    Args:
        data: Book dictionary with "config" and "sections"
        strict: If True, run the full JSON schema; if False, do basic checks only

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Book data must be an object", path="")

    missing = [f for f in ("config", "sections") if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    config = data["config"]
    if not isinstance(config, dict):
        raise ValidationError("config must be an object", path="config")

    missing = [f for f in CONFIG_REQUIRED if f not in config]
    if missing:
        raise ValidationError(
            f"Config missing required fields: {missing}",
            path="config",
            errors=[f"Missing field: {f}" for f in missing],
        )

    sections = data["sections"]
    if not isinstance(sections, list):
        raise ValidationError("sections must be a list", path="sections")
    for i, section in enumerate(sections):
        _validate_section(section, f"sections[{i}]")

    if strict:
        try:
            jsonschema.validate(data, load_schema("book"))
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def _validate_section(data: Any, path: str) -> None:
    """Validate the envelope of a section and its exercises."""
    if not isinstance(data, dict):
        raise ValidationError("section must be an object", path=path)
    if not isinstance(data.get("title"), str):
        raise ValidationError("section title must be a string", path=f"{path}.title")

    exercises = data.get("exercises", [])
    if not isinstance(exercises, list):
        raise ValidationError("exercises must be a list", path=f"{path}.exercises")
    for j, exercise in enumerate(exercises):
        if not isinstance(exercise, dict):
            raise ValidationError(
                "exercise must be an object", path=f"{path}.exercises[{j}]"
            )
        if not isinstance(exercise.get("type"), str):
            raise ValidationError(
                "exercise type must be a string", path=f"{path}.exercises[{j}].type"
            )
