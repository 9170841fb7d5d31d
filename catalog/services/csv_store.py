# -*- coding: utf-8 -*-
"""
Catalog sheet I/O.

Reads an uploaded CSV sheet into catalog rows (header-derived keys, every cell
a string) and writes enriched rows back out for download.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import IO, Iterable, Mapping, Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO]


def read_catalog_csv(source: Source) -> list[dict[str, str]]:
    """
    Parse a CSV sheet into catalog rows.

    Empty cells become "", rows with no values at all are dropped.
    """
    df = pd.read_csv(source, dtype=str, keep_default_na=False, skip_blank_lines=True)
    df.columns = [str(col).strip() for col in df.columns]

    rows = [
        {str(k): str(v) for k, v in record.items()}
        for record in df.to_dict(orient="records")
    ]
    rows = [row for row in rows if any(value.strip() for value in row.values())]
    logger.info(f"Loaded {len(rows)} catalog rows")
    return rows


def _columns(rows: Iterable[Mapping]) -> list[str]:
    columns: list[str] = []
    seen: set[str] = set()
    for row in rows:
        for key in row:
            if key not in seen:
                seen.add(key)
                columns.append(key)
    return columns


def write_catalog_csv(rows: list[Mapping], destination: Source) -> None:
    """Write rows to CSV; columns follow first-seen key order, missing cells empty."""
    df = pd.DataFrame(list(rows), columns=_columns(rows)).fillna("")
    df.to_csv(destination, index=False)
    logger.info(f"Wrote {len(df)} catalog rows")


def export_filename(now: Optional[datetime] = None) -> str:
    """
    Examples:
        >>> from datetime import datetime, timezone
        >>> export_filename(datetime(2026, 1, 1, tzinfo=timezone.utc))
        'enriched-catalog-1767225600000.csv'
    """
    millis = int(now.timestamp() * 1000) if now else int(time.time() * 1000)
    return f"enriched-catalog-{millis}.csv"
