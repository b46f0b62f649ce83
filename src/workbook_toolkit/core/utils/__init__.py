"""
Utils Package

Serialization functions for generated books.
"""

from .serialization import (
    serialize_book,
    deserialize_book,
    load_book_json,
    save_book_json,
)

__all__ = [
    "serialize_book",
    "deserialize_book",
    "load_book_json",
    "save_book_json",
]
