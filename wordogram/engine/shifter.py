"""Horizontal row shifting to maximize vertical letter overlap."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from ..core.constants import SPACE
from ..core.exceptions import PinConflictError
from ..core.models import OverlayEntry, Pin, SplitRow
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass
class ShiftResult:
    solution: List[str]
    overlay: List[OverlayEntry]
    shifts: List[int]


def row_slack(split: SplitRow, width: int) -> int:
    return max(0, width - len(split.raw))


def row_letters(split: SplitRow) -> str:
    """Letter cells of the unshifted row, without the trailing padding."""

    return split.letters[: len(split.raw)]


def resolve_pins(splits: Sequence[SplitRow], width: int, pins: Iterable[Pin]) -> Dict[int, int]:
    """Translate pins into fixed row shifts.

    Pins are exact: anything that would need clamping raises
    :class:`PinConflictError` instead.
    """

    locked: Dict[int, int] = {}
    for pin in pins:
        if not 0 <= pin.row < len(splits):
            raise PinConflictError(
                f"Pin targets row {pin.row} but the grid has {len(splits)} rows",
                pin=pin.to_jsonable(),
                rows=len(splits),
            )
        split = splits[pin.row]
        if not 0 <= pin.raw_index < len(split.raw):
            raise PinConflictError(
                f"Pin index {pin.raw_index} is outside row {pin.row} ({split.raw!r})",
                pin=pin.to_jsonable(),
                row=pin.row,
                raw_length=len(split.raw),
            )
        if not 0 <= pin.target_col < width:
            raise PinConflictError(
                f"Pin column {pin.target_col} is outside the {width}-column grid",
                pin=pin.to_jsonable(),
                width=width,
            )
        shift = pin.target_col - pin.raw_index
        slack = row_slack(split, width)
        if not 0 <= shift <= slack:
            raise PinConflictError(
                f"Pin on row {pin.row} needs shift {shift}, allowed range is 0-{slack}",
                pin=pin.to_jsonable(),
                row=pin.row,
                shift=shift,
                slack=slack,
            )
        if pin.row in locked and locked[pin.row] != shift:
            raise PinConflictError(
                f"Row {pin.row} is already pinned at shift {locked[pin.row]}, "
                f"cannot also pin it at shift {shift}",
                pin=pin.to_jsonable(),
                row=pin.row,
                shift=shift,
                locked_shift=locked[pin.row],
            )
        locked[pin.row] = shift
    return locked


def score_shift(letters: str, shift: int, placed: Sequence[str]) -> int:
    """Count letter matches against every placed row, one per matching row."""

    score = 0
    for offset, ch in enumerate(letters):
        if ch == SPACE:
            continue
        col = shift + offset
        for row in placed:
            if col < len(row) and row[col] == ch:
                score += 1
    return score


def best_shift(letters: str, slack: int, placed: Sequence[str]) -> int:
    """Highest-scoring shift in ``0..slack``; ties go to the smallest shift."""

    scores = {shift: score_shift(letters, shift, placed) for shift in range(slack + 1)}
    return max(scores, key=lambda shift: (scores[shift], -shift))


def apply_shift(letters: str, shift: int, width: int) -> str:
    return (SPACE * shift + letters)[:width].ljust(width)


def greedy_shifts(
    splits: Sequence[SplitRow],
    width: int,
    locked: Dict[int, int],
) -> List[int]:
    """Choose shifts top to bottom, scoring each row against those above it."""

    shifts: List[int] = []
    placed: List[str] = []
    for index, split in enumerate(splits):
        letters = row_letters(split)
        if index in locked:
            shift = locked[index]
        else:
            shift = best_shift(letters, row_slack(split, width), placed)
        LOGGER.debug("Row %d %r -> shift %d", index, split.raw, shift)
        shifts.append(shift)
        placed.append(apply_shift(letters, shift, width))
    return shifts


def place_rows(splits: Sequence[SplitRow], width: int, shifts: Sequence[int]) -> ShiftResult:
    """Apply ``shifts`` to letter rows and move overlay cells with them."""

    solution: List[str] = []
    overlay: List[OverlayEntry] = []
    for index, (split, shift) in enumerate(zip(splits, shifts)):
        solution.append(apply_shift(row_letters(split), shift, width))
        for col, ch in split.overlay:
            overlay.append(OverlayEntry(row=index, col=min(width - 1, shift + col), ch=ch))
    return ShiftResult(solution=solution, overlay=overlay, shifts=list(shifts))


def shift_rows(splits: Sequence[SplitRow], width: int, pins: Iterable[Pin] = ()) -> ShiftResult:
    locked = resolve_pins(splits, width, pins)
    return place_rows(splits, width, greedy_shifts(splits, width, locked))


def overlap_score(solution: Sequence[str]) -> int:
    """Number of row pairs sharing a letter in the same column."""

    total = 0
    width = max((len(row) for row in solution), default=0)
    for col in range(width):
        counts = Counter(row[col] for row in solution if col < len(row) and row[col] != SPACE)
        total += sum(n * (n - 1) // 2 for n in counts.values())
    return total
