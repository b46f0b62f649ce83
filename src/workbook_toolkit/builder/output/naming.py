"""
Module: builder.output.naming

Purpose:
    Suggest a download file name for a rendered workbook.
"""

from __future__ import annotations

import re

DEFAULT_STEM = "workbook"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def suggest_filename(title: str, extension: str = ".pdf") -> str:
    """
    File name derived from a book title.

    Runs of non-alphanumeric characters collapse to one hyphen and the
    result is lower-cased.

    Example:
        >>> suggest_filename("English Grammar: A2 Practice!")
        'english-grammar-a2-practice.pdf'
    """
    stem = _NON_ALNUM.sub("-", title.lower()).strip("-")
    return f"{stem or DEFAULT_STEM}{extension}"
