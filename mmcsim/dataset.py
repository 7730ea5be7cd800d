"""
Dataset adapter: turns a delimited text blob (CSV, semicolon or tab
separated) into the (inter-arrival, service) pairs the stepper consumes.

Format:
    - first non-blank line is the header
    - cells are split on any of ',', ';' or a tab
    - inter-arrival column: first header cell containing one of IAT_KEYWORDS,
      else column 0
    - service column: first header cell containing one of SERVICE_KEYWORDS,
      else column 1 (column 0 when the header has a single cell)

Rows that do not parse, or carry a negative inter-arrival time or a
non-positive service time, are dropped and counted, never raised.
"""

import logging
import math
import re
from typing import List, Optional, Sequence, Tuple

from .config import (
    DEFAULT_IAT_COLUMN,
    DEFAULT_SERVICE_COLUMN,
    DELIMITER_PATTERN,
    IAT_KEYWORDS,
    SERVICE_KEYWORDS,
)
from .models import DatasetParseResult, TimedPair

logger = logging.getLogger(__name__)

_DELIMITER = re.compile(DELIMITER_PATTERN)


def split_line(line: str) -> List[str]:
    return [cell.strip() for cell in _DELIMITER.split(line)]

def _find_column(header: Sequence[str], keywords: Sequence[str]) -> Optional[int]:
    for i, cell in enumerate(header):
        name = cell.strip().lower()
        if any(k in name for k in keywords):
            return i
    return None

def detect_columns(header: Sequence[str]) -> Tuple[int, int]:
    """
    Pick (inter_arrival_column, service_column) from header cells.
    Substring matching, so atypical headers may resolve oddly; the positional
    fallback keeps plain two-column files working.
    """
    iat_col = _find_column(header, IAT_KEYWORDS)
    if iat_col is None:
        iat_col = DEFAULT_IAT_COLUMN

    st_col = _find_column(header, SERVICE_KEYWORDS)
    if st_col is None:
        st_col = DEFAULT_SERVICE_COLUMN if len(header) > 1 else len(header) - 1

    return iat_col, st_col

def _parse_float(cell: str) -> Optional[float]:
    try:
        value = float(cell)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value

def parse_row(cells: Sequence[str], iat_col: int, st_col: int) -> Optional[TimedPair]:
    if iat_col >= len(cells) or st_col >= len(cells):
        return None
    iat = _parse_float(cells[iat_col])
    st = _parse_float(cells[st_col])
    if iat is None or st is None:
        return None
    if iat < 0 or st <= 0:
        return None
    return TimedPair(inter_arrival_time=iat, service_time=st)

def parse_dataset(text: str) -> DatasetParseResult:
    lines = [ln for ln in text.splitlines() if ln.strip()]
    if len(lines) < 2:
        return DatasetParseResult(pairs=[], dropped_rows=0)

    header = split_line(lines[0])
    iat_col, st_col = detect_columns(header)

    pairs: List[TimedPair] = []
    dropped = 0
    for lineno, line in enumerate(lines[1:], start=2):
        pair = parse_row(split_line(line), iat_col, st_col)
        if pair is None:
            dropped += 1
            logger.debug("dropping dataset row %d: %r", lineno, line)
            continue
        pairs.append(pair)

    logger.info("parsed %d dataset rows (%d dropped), iat column %d, service column %d",
                len(pairs), dropped, iat_col, st_col)
    return DatasetParseResult(pairs=pairs, dropped_rows=dropped,
                              iat_column=iat_col, service_column=st_col)

def parse_csv(text: str) -> List[TimedPair]:
    return parse_dataset(text).pairs
