"""Batch phrase tables for building many puzzles in one run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

REQUIRED_COLUMNS = ("phrase",)


@dataclass
class PhraseRequest:
    phrase: str
    id: Optional[str] = None
    author: Optional[str] = None
    min_width: Optional[int] = None
    max_width: Optional[int] = None


def _optional_str(value) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _phrase_text(value) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    text = str(value)
    return text if text.strip() else None


def _optional_int(value) -> Optional[int]:
    if value is None or pd.isna(value):
        return None
    return int(value)


def load_phrase_table(path: Path | str) -> List[PhraseRequest]:
    """Read a TSV with a ``phrase`` column and optional per-row overrides.

    Rows with a blank phrase are skipped. Phrase text is kept verbatim,
    surrounding whitespace included, so it matches a single-phrase build.
    """

    df = pd.read_csv(path, sep="\t", dtype=str, keep_default_na=False, na_values=[""])
    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Phrase table {path} is missing columns: {', '.join(missing)}")

    entries: List[PhraseRequest] = []
    for record in df.to_dict(orient="records"):
        phrase = _phrase_text(record.get("phrase"))
        if phrase is None:
            continue
        entries.append(
            PhraseRequest(
                phrase=phrase,
                id=_optional_str(record.get("id")),
                author=_optional_str(record.get("author")),
                min_width=_optional_int(record.get("min_width")),
                max_width=_optional_int(record.get("max_width")),
            )
        )
    LOGGER.info("Loaded %d phrases from %s", len(entries), path)
    return entries
