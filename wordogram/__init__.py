"""Wordogram builder: phrases in, letter-picross puzzle artifacts out.

This package exposes the public API surface via:

- ``wordogram.engine.builder.build_puzzle``: one-call puzzle construction.
- ``wordogram.engine.builder.PuzzleBuilder``: configurable builder with an
  injectable clock and id factory.
- ``wordogram.io.puzzle_json``: artifact serialization and schema-gated loading.
"""

from .core.exceptions import (
    PhraseTooLongError,
    PinConflictError,
    SchemaUnsupportedError,
    ValidationError,
    WidthUnfittableError,
    WordogramError,
)
from .core.models import OverlayEntry, Pin, Puzzle, PuzzleMeta
from .engine.builder import BuilderConfig, BuildOptions, PuzzleBuilder, build_puzzle

__all__ = [
    "BuildOptions",
    "BuilderConfig",
    "OverlayEntry",
    "PhraseTooLongError",
    "Pin",
    "PinConflictError",
    "Puzzle",
    "PuzzleBuilder",
    "PuzzleMeta",
    "SchemaUnsupportedError",
    "ValidationError",
    "WidthUnfittableError",
    "WordogramError",
    "build_puzzle",
]

__version__ = "0.3.0"
