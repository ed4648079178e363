"""Split raw row strings into letter cells and punctuation overlay."""

from __future__ import annotations

from typing import List, Tuple

from ..core.constants import CellKind, SPACE
from ..core.exceptions import WidthUnfittableError
from ..core.models import SplitRow
from ..data.tokenizer import classify


def split_cells(raw: str, width: int, row: int = 0) -> SplitRow:
    """Map every raw character to one column of a ``width``-cell row.

    Letters stay, whitespace stays blank, anything else goes to the overlay
    and leaves a blank behind in the letter row.
    """

    if len(raw) > width:
        raise WidthUnfittableError(
            f"Row {row} needs {len(raw)} cells but the grid is {width} wide",
            row=row,
            length=len(raw),
            width=width,
        )
    cells: List[str] = []
    overlay: List[Tuple[int, str]] = []
    for col, ch in enumerate(raw):
        kind = classify(ch)
        if kind == CellKind.LETTER:
            cells.append(ch.upper())
        elif kind == CellKind.SPACE:
            cells.append(SPACE)
        else:
            overlay.append((col, ch))
            cells.append(SPACE)
    return SplitRow(raw=raw, letters="".join(cells).ljust(width), overlay=overlay)
