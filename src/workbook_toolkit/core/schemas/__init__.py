"""
Schemas Package

JSON schema definition and validation utilities for generated books.
"""

from .validator import validate_book, ValidationError

__all__ = [
    "validate_book",
    "ValidationError",
]
