"""
Module: builder.config

Purpose:
    Configuration dataclass for the build pipeline (compile + render).
    Immutable configuration with validation on construction.

Key Classes:
    - BuilderConfig: Output location and rendering options

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: build_book()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .layout.config import LayoutConfig


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a workbook PDF (immutable).

    Attributes:
        output_dir: Directory for the generated PDF
        filename: File name override (default: derived from the book title)
        seed: Seed for the matching column shuffle; None for fresh randomness
        layout: Layout configuration

    Example:
        >>> config = BuilderConfig(output_dir=Path("output"), seed=7)
    """

    output_dir: Path
    filename: Optional[str] = None
    seed: Optional[int] = None
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.filename is not None:
            if not self.filename.lower().endswith(".pdf"):
                raise ValueError(f"filename must end with .pdf: {self.filename!r}")
            if Path(self.filename).name != self.filename:
                raise ValueError(f"filename must not contain directories: {self.filename!r}")
