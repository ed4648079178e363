"""JSON serialization for puzzle artifacts."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from ..core.constants import SCHEMA_VERSION
from ..core.exceptions import SchemaUnsupportedError
from ..core.models import OverlayEntry, Puzzle, PuzzleMeta


def puzzle_to_json(puzzle: Puzzle, indent: int | None = 2) -> str:
    return json.dumps(puzzle.to_jsonable(), ensure_ascii=False, indent=indent)


def load_puzzle(payload: Mapping[str, Any] | str) -> Puzzle:
    """Parse an artifact produced by any ``0.3`` builder.

    Unknown top-level fields are ignored so newer producers stay readable.
    """

    data: Dict[str, Any] = json.loads(payload) if isinstance(payload, str) else dict(payload)
    schema = data.get("schema")
    if schema != SCHEMA_VERSION:
        raise SchemaUnsupportedError(
            f"Unsupported puzzle schema {schema!r}, expected {SCHEMA_VERSION!r}",
            schema=schema,
            expected=SCHEMA_VERSION,
        )
    meta = data.get("meta") or {}
    return Puzzle(
        id=str(data["id"]),
        rows=int(data["rows"]),
        cols=int(data["cols"]),
        solution=[str(row) for row in data["solution"]],
        overlay=[
            OverlayEntry(row=int(o["row"]), col=int(o["col"]), ch=str(o["ch"]))
            for o in data.get("overlay", [])
        ],
        meta=PuzzleMeta(
            phrase=meta.get("phrase"),
            author=meta.get("author"),
            date=meta.get("date"),
        ),
        debug=data.get("debug"),
        schema=schema,
    )
