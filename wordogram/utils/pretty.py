"""Pretty-print helpers for puzzle grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import Dict, Tuple

from ..core.constants import SPACE
from ..core.models import Puzzle
from ..engine.shifter import overlap_score

BLANK = "."


def format_puzzle(puzzle: Puzzle) -> str:
    overlay: Dict[Tuple[int, int], str] = {(o.row, o.col): o.ch for o in puzzle.overlay}
    header_cells = [f"{c:>2}" for c in range(puzzle.cols)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * puzzle.cols - 1))
    for r, row in enumerate(puzzle.solution):
        symbols = [
            overlay.get((r, c), BLANK if ch == SPACE else ch)
            for c, ch in enumerate(row)
        ]
        row_render = " ".join(f"{symbol:>2}" for symbol in symbols)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def print_puzzle_stats(puzzle: Puzzle, *, stream=None) -> None:
    """Print grid + layout stats for a built puzzle."""

    stream = stream or sys.stdout
    print(format_puzzle(puzzle), file=stream)

    total_cells = puzzle.rows * puzzle.cols
    letters = Counter(ch for row in puzzle.solution for ch in row if ch != SPACE)
    letter_cells = sum(letters.values())

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Id:            {puzzle.id}", file=stream)
    print(f"  Size:          {puzzle.rows} x {puzzle.cols} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Overlay:       {len(puzzle.overlay)}", file=stream)
    print(f"  Overlap:       {overlap_score(puzzle.solution)}", file=stream)
    if letters:
        common = " ".join(f"{ch}:{n}" for ch, n in letters.most_common(5))
        print(f"  Top letters:   {common}", file=stream)

    if puzzle.debug:
        print(file=stream)
        print("--- Layout ---", file=stream)
        for r, (raw, shift) in enumerate(zip(puzzle.debug["raw"], puzzle.debug["shifts"])):
            print(f"  Row {r:>2}: shift {shift:>2}  {raw!r}", file=stream)
