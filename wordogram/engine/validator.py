"""Deterministic integrity checks for assembled puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..core.constants import SPACE
from ..core.exceptions import ValidationError
from ..core.models import Puzzle
from ..data.tokenizer import is_letter, is_overlay_char, letter_multiset
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over a finished puzzle."""

    def validate(self, puzzle: Puzzle, phrase: Optional[str] = None) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_shape(puzzle)
            self._check_letters_valid(puzzle)
            self._check_overlay(puzzle)
            if phrase is not None:
                self._check_letters_preserved(puzzle, phrase)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_shape(self, puzzle: Puzzle) -> None:
        if puzzle.rows != len(puzzle.solution):
            raise ValidationError(
                f"Puzzle declares {puzzle.rows} rows but has {len(puzzle.solution)}"
            )
        if puzzle.rows < 1 or puzzle.cols < 1:
            raise ValidationError(f"Degenerate grid {puzzle.rows}x{puzzle.cols}")
        for r, row in enumerate(puzzle.solution):
            if len(row) != puzzle.cols:
                raise ValidationError(
                    f"Row {r} has {len(row)} cells, expected {puzzle.cols}", row=r
                )

    def _check_letters_valid(self, puzzle: Puzzle) -> None:
        for r, row in enumerate(puzzle.solution):
            for c, ch in enumerate(row):
                if ch != SPACE and not (is_letter(ch) and ch.isupper()):
                    raise ValidationError(f"Invalid cell '{ch}' at ({r},{c})", row=r, col=c)

    def _check_overlay(self, puzzle: Puzzle) -> None:
        seen: Set[Tuple[int, int]] = set()
        for entry in puzzle.overlay:
            if not (0 <= entry.row < puzzle.rows and 0 <= entry.col < puzzle.cols):
                raise ValidationError(
                    f"Overlay '{entry.ch}' at ({entry.row},{entry.col}) is off the grid",
                    row=entry.row,
                    col=entry.col,
                )
            if len(entry.ch) != 1 or not is_overlay_char(entry.ch):
                raise ValidationError(
                    f"Overlay character {entry.ch!r} at ({entry.row},{entry.col}) is not punctuation",
                    row=entry.row,
                    col=entry.col,
                )
            key = (entry.row, entry.col)
            if key in seen:
                raise ValidationError(
                    f"Two overlay entries share ({entry.row},{entry.col})",
                    row=entry.row,
                    col=entry.col,
                )
            seen.add(key)
            if puzzle.solution[entry.row][entry.col] != SPACE:
                raise ValidationError(
                    f"Overlay '{entry.ch}' covers a letter at ({entry.row},{entry.col})",
                    row=entry.row,
                    col=entry.col,
                )

    def _check_letters_preserved(self, puzzle: Puzzle, phrase: str) -> None:
        expected = letter_multiset(phrase)
        actual = letter_multiset("".join(puzzle.solution))
        if expected != actual:
            missing = expected - actual
            extra = actual - expected
            raise ValidationError(
                f"Letters changed during layout (missing={dict(missing)}, extra={dict(extra)})"
            )
