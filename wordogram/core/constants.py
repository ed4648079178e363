"""Shared constants and enumerations for the wordogram builder."""

from __future__ import annotations

from enum import Enum

SCHEMA_VERSION = "0.3"

# Width range advertised to puzzle authors; the CLI uses it as its default.
DEFAULT_MIN_WIDTH = 14
DEFAULT_MAX_WIDTH = 24

# Hard cap on grid columns to bound the width search.
MAX_GRID_COLS = 30

DEFAULT_MAX_PHRASE_LENGTH = 280
DEFAULT_ID_PREFIX = "wordogram"

SPACE = " "


class CellKind(str, Enum):
    """Classification of a single raw character."""

    LETTER = "LETTER"
    SPACE = "SPACE"
    OVERLAY = "OVERLAY"


class ShiftStrategy(str, Enum):
    """How horizontal row offsets are chosen."""

    GREEDY = "greedy"
    CPSAT = "cpsat"


class ErrorKind(str, Enum):
    """Structured failure kinds surfaced by a build call."""

    PHRASE_TOO_LONG = "PHRASE_TOO_LONG"
    WIDTH_UNFITTABLE = "WIDTH_UNFITTABLE"
    PIN_CONFLICT = "PIN_CONFLICT"
    SCHEMA_UNSUPPORTED = "SCHEMA_UNSUPPORTED"
    VALIDATION_FAILED = "VALIDATION_FAILED"
