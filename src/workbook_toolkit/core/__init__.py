"""
Workbook Toolkit Core Package

Shared data models, schema validation and serialization.

1. **Immutable Data Models**
   - Frozen dataclasses; new instances are created for any change.

2. **Validated at Construction**
   - BookConfig rejects out-of-range values in __post_init__.
   - Raw JSON can be checked first with schemas.validate_book().

3. **Lenient Exercise Payloads**
   - Missing item fields become None rather than errors, so a single
     malformed exercise never blocks the rest of a book.
"""

from .models import BookConfig, BookSection, GeneratedBook, TrimSize
from .schemas import ValidationError, validate_book
from .utils import deserialize_book, serialize_book

__all__ = [
    "BookConfig",
    "BookSection",
    "GeneratedBook",
    "TrimSize",
    "ValidationError",
    "validate_book",
    "deserialize_book",
    "serialize_book",
]
