"""Data models supporting the wordogram builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import SCHEMA_VERSION, SPACE
from .exceptions import PinConflictError


@dataclass(frozen=True)
class Chunk:
    """A whitespace-delimited run of the phrase, letters uppercased."""

    text: str

    def __len__(self) -> int:
        return len(self.text)


@dataclass
class PackedRow:
    """Chunks assigned to one grid row, joined by single spaces."""

    chunks: List[Chunk] = field(default_factory=list)

    @property
    def raw(self) -> str:
        return SPACE.join(chunk.text for chunk in self.chunks)

    @property
    def length(self) -> int:
        return len(self.raw)


@dataclass
class SplitRow:
    """A raw row separated into its letter/space cells and overlay cells."""

    raw: str
    letters: str
    overlay: List[Tuple[int, str]] = field(default_factory=list)


@dataclass(frozen=True)
class Pin:
    """Force ``raw[raw_index]`` of ``row`` onto column ``target_col``."""

    row: int
    raw_index: int
    target_col: int

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "Pin":
        raw_index = data.get("raw_index", data.get("rawIndex"))
        target_col = data.get("target_col", data.get("targetCol"))
        row = data.get("row")
        message = f"Pin requires integer row, raw_index and target_col: {data!r}"
        detail = {str(key): str(value) for key, value in data.items()}
        if row is None or raw_index is None or target_col is None:
            raise PinConflictError(message, pin=detail)
        try:
            return cls(row=int(row), raw_index=int(raw_index), target_col=int(target_col))
        except (TypeError, ValueError) as exc:
            raise PinConflictError(message, pin=detail) from exc

    def to_jsonable(self) -> Dict[str, int]:
        return {"row": self.row, "raw_index": self.raw_index, "target_col": self.target_col}


@dataclass(frozen=True)
class OverlayEntry:
    """A fixed non-letter character at its final grid position."""

    row: int
    col: int
    ch: str

    def to_jsonable(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col, "ch": self.ch}


@dataclass
class PuzzleMeta:
    phrase: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None

    def to_jsonable(self) -> Dict[str, str]:
        payload: Dict[str, str] = {}
        if self.phrase is not None:
            payload["phrase"] = self.phrase
        if self.author is not None:
            payload["author"] = self.author
        if self.date is not None:
            payload["date"] = self.date
        return payload


@dataclass
class Puzzle:
    """The finished puzzle artifact handed to game clients."""

    id: str
    rows: int
    cols: int
    solution: List[str]
    overlay: List[OverlayEntry]
    meta: PuzzleMeta = field(default_factory=PuzzleMeta)
    debug: Optional[Dict[str, Any]] = None
    schema: str = SCHEMA_VERSION

    def to_jsonable(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "schema": self.schema,
            "id": self.id,
            "rows": self.rows,
            "cols": self.cols,
            "solution": list(self.solution),
            "overlay": [entry.to_jsonable() for entry in self.overlay],
            "meta": self.meta.to_jsonable(),
        }
        if self.debug is not None:
            payload["debug"] = self.debug
        return payload
