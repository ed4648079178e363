"""CLI entrypoint for the wordogram puzzle builder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from wordogram.core.constants import (
    DEFAULT_MAX_PHRASE_LENGTH,
    DEFAULT_MAX_WIDTH,
    DEFAULT_MIN_WIDTH,
    MAX_GRID_COLS,
    ShiftStrategy,
)
from wordogram.core.exceptions import WordogramError
from wordogram.core.models import Pin
from wordogram.engine.builder import BuilderConfig, BuildOptions, PuzzleBuilder
from wordogram.io.phrases import PhraseRequest, load_phrase_table
from wordogram.utils.logger import configure_logging, get_logger
from wordogram.utils.pretty import print_puzzle_stats

LOGGER = get_logger("wordogram.cli")


def parse_pin(text: str) -> Pin:
    """Parse ``ROW:RAW_INDEX:COL`` into a :class:`Pin`."""
    parts = text.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"pin must look like ROW:RAW_INDEX:COL, got {text!r}")
    try:
        row, raw_index, target_col = (int(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"pin values must be integers: {text!r}") from exc
    return Pin(row=row, raw_index=raw_index, target_col=target_col)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build letter-picross puzzles from phrases",
    )
    parser.add_argument("phrase", nargs="?", help="Phrase to turn into a puzzle")
    parser.add_argument(
        "--phrases-file",
        type=Path,
        metavar="FILE",
        help="TSV with a 'phrase' column (optional: id, author, min_width, max_width)",
    )
    parser.add_argument("--id", type=str, help="Puzzle identifier (single phrase only)")
    parser.add_argument("--author", type=str, help="Author recorded in puzzle metadata")
    parser.add_argument(
        "--min-width",
        type=int,
        default=DEFAULT_MIN_WIDTH,
        help=f"Smallest grid width to try (default {DEFAULT_MIN_WIDTH})",
    )
    parser.add_argument(
        "--max-width",
        type=int,
        default=DEFAULT_MAX_WIDTH,
        help=f"Largest grid width to try (default {DEFAULT_MAX_WIDTH})",
    )
    parser.add_argument(
        "--max-cols",
        type=int,
        default=MAX_GRID_COLS,
        help=f"Hard cap on grid width (default {MAX_GRID_COLS})",
    )
    parser.add_argument(
        "--max-phrase-length",
        type=int,
        default=DEFAULT_MAX_PHRASE_LENGTH,
        help="Reject phrases longer than this many characters",
    )
    parser.add_argument(
        "--pin",
        type=parse_pin,
        action="append",
        default=[],
        metavar="ROW:RAW_INDEX:COL",
        help="Force a raw character of a row onto a column (repeatable, single phrase only)",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in ShiftStrategy],
        default=ShiftStrategy.GREEDY.value,
        help="Row shifting strategy",
    )
    parser.add_argument("--solver-timeout", type=float, default=10.0, help="CP-SAT time limit in seconds")
    parser.add_argument("--debug", action="store_true", help="Attach packing/shift diagnostics")
    parser.add_argument("--pretty", action="store_true", help="Print the grid and stats to stderr")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if bool(args.phrase) == bool(args.phrases_file):
        parser.error("provide exactly one of PHRASE or --phrases-file")
    if args.phrases_file and (args.id or args.pin):
        parser.error("--id and --pin only apply to a single phrase")

    builder = PuzzleBuilder(
        BuilderConfig(
            max_phrase_length=args.max_phrase_length,
            max_cols=args.max_cols,
            strategy=ShiftStrategy(args.strategy),
            solver_timeout_seconds=args.solver_timeout,
        )
    )

    if args.phrases_file:
        batch = load_phrase_table(args.phrases_file)
    else:
        batch = [PhraseRequest(phrase=args.phrase, id=args.id)]

    results: List[Dict[str, Any]] = []
    failures = 0
    for request in batch:
        options = BuildOptions(
            id=request.id,
            min_width=request.min_width if request.min_width is not None else args.min_width,
            max_width=request.max_width if request.max_width is not None else args.max_width,
            author=request.author or args.author,
            pins=args.pin,
            debug=args.debug,
        )
        try:
            puzzle = builder.build(request.phrase, options)
        except WordogramError as exc:
            failures += 1
            LOGGER.error("Could not build %r: %s", request.phrase, exc)
            results.append({"phrase": request.phrase, "error": exc.to_jsonable()})
            continue
        if args.pretty:
            print_puzzle_stats(puzzle, stream=sys.stderr)
        results.append(puzzle.to_jsonable())

    payload: Any = results if args.phrases_file else results[0]
    output_text = json.dumps(payload, ensure_ascii=False, indent=2, default=str)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 1 if failures else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
