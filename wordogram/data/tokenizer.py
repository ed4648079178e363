"""Phrase tokenization and character classification."""

from __future__ import annotations

import re
from collections import Counter
from typing import List

from ..core.constants import CellKind
from ..core.models import Chunk

LETTER_RE = re.compile(r"[A-Za-z]")
WHITESPACE_RE = re.compile(r"\s+")


def is_letter(ch: str) -> bool:
    """Only ASCII letters are playable; accented letters become overlay."""

    return bool(LETTER_RE.fullmatch(ch))


def classify(ch: str) -> CellKind:
    if is_letter(ch):
        return CellKind.LETTER
    if ch.isspace():
        return CellKind.SPACE
    return CellKind.OVERLAY


def is_overlay_char(ch: str) -> bool:
    return classify(ch) == CellKind.OVERLAY


def normalize_chunk(raw: str) -> str:
    return "".join(ch.upper() if is_letter(ch) else ch for ch in raw)


def tokenize(phrase: str) -> List[Chunk]:
    """Split ``phrase`` on whitespace runs, keeping punctuation attached.

    ``"DON'T"`` and ``"ghost-white"`` each stay a single chunk, and a dash
    written as ``"it— the"`` sticks to the chunk on its left.
    """

    return [Chunk(normalize_chunk(piece)) for piece in WHITESPACE_RE.split(str(phrase)) if piece]


def letter_multiset(text: str) -> Counter:
    """Uppercased letter counts of ``text``, ignoring everything else."""

    return Counter(ch.upper() for ch in text if is_letter(ch))


__all__ = [
    "classify",
    "is_letter",
    "is_overlay_char",
    "letter_multiset",
    "normalize_chunk",
    "tokenize",
]
