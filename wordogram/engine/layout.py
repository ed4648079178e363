"""Row packing and grid width selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import MAX_GRID_COLS
from ..core.exceptions import WidthUnfittableError
from ..core.models import Chunk, PackedRow
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass
class WidthChoice:
    width: int
    rows: List[PackedRow]
    min_width: int
    max_width: int
    scanned: Dict[int, int] = field(default_factory=dict)

    @property
    def row_count(self) -> int:
        return len(self.rows)


def longest_chunk_length(chunks: Sequence[Chunk]) -> int:
    return max((len(chunk) for chunk in chunks), default=0)


def pack_lines(chunks: Sequence[Chunk], width: int) -> List[PackedRow]:
    """Greedily fill rows left to right with single-space separators.

    Chunks are never split. A chunk wider than ``width`` lands alone on its
    own row; catching that is the width selector's job.
    """

    rows: List[PackedRow] = []
    current: List[Chunk] = []
    current_len = 0
    for chunk in chunks:
        need = len(chunk) + (1 if current else 0)
        if current_len + need <= width:
            current.append(chunk)
            current_len += need
        else:
            if current:
                rows.append(PackedRow(current))
            current = [chunk]
            current_len = len(chunk)
    if current:
        rows.append(PackedRow(current))
    return rows


def resolve_width_range(
    chunks: Sequence[Chunk],
    min_width: Optional[int] = None,
    max_width: Optional[int] = None,
    max_cols: int = MAX_GRID_COLS,
) -> Tuple[int, int]:
    """Return the effective ``(min, max)`` widths for ``chunks``.

    The minimum never drops below the longest chunk. An explicit maximum
    narrower than that chunk, or any range beyond ``max_cols``, is an error
    rather than a silent widening or clamp.
    """

    longest = longest_chunk_length(chunks)
    if max_width and max_width < longest:
        raise WidthUnfittableError(
            f"Longest chunk ({longest} cells) exceeds max width {max_width}",
            longest_chunk=longest,
            max_width=max_width,
        )
    lo = max(min_width or longest, longest, 1)
    hi = max(max_width or lo, lo)
    if hi > max_cols:
        raise WidthUnfittableError(
            f"Width range {lo}-{hi} exceeds the {max_cols}-column limit",
            min_width=lo,
            max_width=hi,
            max_cols=max_cols,
        )
    return lo, hi


def choose_width(
    chunks: Sequence[Chunk],
    min_width: Optional[int] = None,
    max_width: Optional[int] = None,
    max_cols: int = MAX_GRID_COLS,
) -> WidthChoice:
    """Scan every width in range; fewest rows wins, then the smaller width."""

    lo, hi = resolve_width_range(chunks, min_width, max_width, max_cols)
    scanned: Dict[int, int] = {}
    packings: Dict[int, List[PackedRow]] = {}
    for width in range(lo, hi + 1):
        packed = pack_lines(chunks, width)
        scanned[width] = len(packed)
        packings[width] = packed
        LOGGER.debug("Width %d packs into %d rows", width, len(packed))

    best = min(scanned, key=lambda width: (scanned[width], width))
    rows = packings[best] or [PackedRow()]
    if any(row.length > best for row in rows):
        raise WidthUnfittableError(
            f"No packing fits width {best}",
            width=best,
        )
    LOGGER.debug("Chose width %d (%d rows) from range %d-%d", best, len(rows), lo, hi)
    return WidthChoice(width=best, rows=rows, min_width=lo, max_width=hi, scanned=scanned)
