"""Puzzle build orchestration.

Pipeline:
  1. Tokenize the phrase into chunks.
  2. Choose the grid width and pack chunks into rows.
  3. Split each row into letter cells and punctuation overlay.
  4. Shift rows for vertical overlap (pins first, then greedy or CP-SAT).
  5. Assemble and validate the artifact.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..core.constants import (
    DEFAULT_ID_PREFIX,
    DEFAULT_MAX_PHRASE_LENGTH,
    MAX_GRID_COLS,
    ShiftStrategy,
)
from ..core.exceptions import PhraseTooLongError, ValidationError
from ..core.models import Pin, Puzzle, PuzzleMeta, SplitRow
from ..data.tokenizer import tokenize
from ..utils.logger import get_logger
from .cells import split_cells
from .layout import WidthChoice, choose_width
from .shifter import ShiftResult, greedy_shifts, overlap_score, place_rows, resolve_pins
from .solver import solve_shifts
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]
PinLike = Union[Pin, Mapping[str, Any]]


@dataclass
class BuilderConfig:
    max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH
    max_cols: int = MAX_GRID_COLS
    strategy: ShiftStrategy = ShiftStrategy.GREEDY
    solver_timeout_seconds: float = 10.0
    solver_seed: int = 0
    id_prefix: str = DEFAULT_ID_PREFIX


@dataclass
class BuildOptions:
    """Per-puzzle options; ``None`` means "use the builder default"."""

    id: Optional[str] = None
    min_width: Optional[int] = None
    max_width: Optional[int] = None
    author: Optional[str] = None
    pins: Sequence[Pin] = ()
    debug: bool = False
    strategy: Optional[ShiftStrategy] = None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def coerce_pins(pins: Optional[Iterable[PinLike]]) -> List[Pin]:
    return [pin if isinstance(pin, Pin) else Pin.from_mapping(pin) for pin in (pins or ())]


class PuzzleBuilder:
    """Turns phrases into puzzle artifacts.

    The builder only holds configuration and its injected clock and id
    factory, so one instance can serve concurrent builds.
    """

    def __init__(
        self,
        config: Optional[BuilderConfig] = None,
        clock: Optional[Clock] = None,
        id_factory: Optional[IdFactory] = None,
        validator: Optional[PuzzleValidator] = None,
    ) -> None:
        self.config = config or BuilderConfig()
        self.clock = clock or utc_now
        self.id_factory = id_factory or self._random_id
        self.validator = validator or PuzzleValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def build(self, phrase: str, options: Optional[BuildOptions] = None) -> Puzzle:
        options = options or BuildOptions()
        phrase = str(phrase)
        if len(phrase) > self.config.max_phrase_length:
            raise PhraseTooLongError(
                f"Phrase has {len(phrase)} characters, limit is {self.config.max_phrase_length}",
                length=len(phrase),
                limit=self.config.max_phrase_length,
            )

        chunks = tokenize(phrase)
        choice = choose_width(
            chunks,
            min_width=options.min_width,
            max_width=options.max_width,
            max_cols=self.config.max_cols,
        )
        width = choice.width
        splits = [split_cells(row.raw, width, row=index) for index, row in enumerate(choice.rows)]
        strategy = ShiftStrategy(options.strategy or self.config.strategy)
        shifted = self._shift(splits, width, coerce_pins(options.pins), strategy)

        puzzle = Puzzle(
            id=options.id or self.id_factory(),
            rows=len(shifted.solution),
            cols=width,
            solution=shifted.solution,
            overlay=shifted.overlay,
            meta=PuzzleMeta(phrase=phrase, author=options.author, date=self.clock().isoformat()),
            debug=self._debug_payload(choice, splits, shifted, strategy) if options.debug else None,
        )

        validation = self.validator.validate(puzzle, phrase)
        if not validation.ok:
            raise ValidationError(
                f"Puzzle validation failed: {validation.messages}",
                puzzle_id=puzzle.id,
                messages=list(validation.messages),
            )

        LOGGER.info(
            "Built puzzle %s: %dx%d, %d overlay cells, overlap %d",
            puzzle.id,
            puzzle.rows,
            puzzle.cols,
            len(puzzle.overlay),
            overlap_score(puzzle.solution),
        )
        return puzzle

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _shift(
        self,
        splits: Sequence[SplitRow],
        width: int,
        pins: Sequence[Pin],
        strategy: ShiftStrategy,
    ) -> ShiftResult:
        locked = resolve_pins(splits, width, pins)
        shifts = None
        if strategy == ShiftStrategy.CPSAT:
            shifts = solve_shifts(
                splits,
                width,
                locked,
                timeout=self.config.solver_timeout_seconds,
                seed=self.config.solver_seed,
            )
            if shifts is None:
                LOGGER.warning("Falling back to greedy shifting")
        if shifts is None:
            shifts = greedy_shifts(splits, width, locked)
        return place_rows(splits, width, shifts)

    @staticmethod
    def _debug_payload(
        choice: WidthChoice,
        splits: Sequence[SplitRow],
        shifted: ShiftResult,
        strategy: ShiftStrategy,
    ) -> Dict[str, Any]:
        return {
            "packed": [[chunk.text for chunk in row.chunks] for row in choice.rows],
            "raw": [split.raw for split in splits],
            "shifts": list(shifted.shifts),
            "strategy": strategy.value,
            "width_scan": {str(width): rows for width, rows in choice.scanned.items()},
        }

    def _random_id(self) -> str:
        return f"{self.config.id_prefix}-{uuid.uuid4().hex[:12]}"


def build_puzzle(
    phrase: str,
    *,
    builder: Optional[PuzzleBuilder] = None,
    id: Optional[str] = None,
    min_width: Optional[int] = None,
    max_width: Optional[int] = None,
    author: Optional[str] = None,
    pins: Optional[Iterable[PinLike]] = None,
    debug: bool = False,
    strategy: Optional[Union[ShiftStrategy, str]] = None,
) -> Puzzle:
    """Build a puzzle with keyword options; pins may be ``Pin`` or dicts.

    A malformed pin mapping raises :class:`PinConflictError` like any other
    unusable pin. An unknown ``strategy`` name is a programming error and
    raises ``ValueError`` before any build work starts.
    """

    options = BuildOptions(
        id=id,
        min_width=min_width,
        max_width=max_width,
        author=author,
        pins=coerce_pins(pins),
        debug=debug,
        strategy=ShiftStrategy(strategy) if strategy else None,
    )
    return (builder or PuzzleBuilder()).build(phrase, options)
