"""
Row-to-record transformation.

Column layout of the auction sheet (positional, no header lookup):

    0 name | 1 rating | 2 pool | 3 role | 4 country | 5 base price

Parsing never rejects a row: unparsable numbers fall back to a default and
missing trailing cells read as empty strings.
"""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from player_feed.config import MAX_PLAYERS
from player_feed.domain.models import Nationality, PlayerRecord
from player_feed.ids import get_id_generator
from player_feed.infrastructure.sheet_reader import read_rows
from player_feed.utils.logging import get_logger

log = get_logger(__name__)

NAME_COL = 0
RATING_COL = 1
POOL_COL = 2
ROLE_COL = 3
COUNTRY_COL = 4
BASE_PRICE_COL = 5

HOME_COUNTRY = "India"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

IdSource = Callable[[], str]


def parse_int_or_default(value: str, default: int) -> int:
    """
    Parse the leading signed decimal integer of ``value``.

    ``"200"`` -> 200, ``"200.5"`` -> 200, ``"12abc"`` -> 12; anything without
    a leading integer, or one outside the signed 64-bit range, returns
    ``default``.
    """
    match = _INT_PREFIX.match(value or "")
    if match is None:
        return default
    try:
        result = int(match.group(1))
    except ValueError:
        # digit strings past sys.get_int_max_str_digits()
        return default
    if not _INT64_MIN <= result <= _INT64_MAX:
        return default
    return result


def parse_float_or_default(value: str, default: float) -> float:
    """
    Parse the leading floating point number of ``value``, else ``default``.

    Out-of-range tokens such as ``"1e999"`` also return ``default``.
    """
    match = _FLOAT_PREFIX.match(value or "")
    if match is None:
        return default
    result = float(match.group(1))
    if not math.isfinite(result):
        return default
    return result


def format_pool(value: str) -> str:
    if len(value) > 1 and value[0] == "P":
        return value[1:]
    return value


def classify_nationality(value: str) -> Nationality:
    return "Indian" if value == HOME_COUNTRY else "Foreign"


def _cell(row: Sequence[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def row_to_record(row: Sequence[str], id_generator: Optional[IdSource] = None) -> PlayerRecord:
    """
    Build a PlayerRecord from one raw sheet row.

    Parameters
    ----------
    row : Sequence[str]
        Cell strings in sheet order.
    id_generator : Callable[[], str] | None
        Identifier source; defaults to the process-wide generator.
    """
    next_id = id_generator or get_id_generator()
    return PlayerRecord(
        name=_cell(row, NAME_COL),
        identifier=next_id(),
        rating=parse_float_or_default(_cell(row, RATING_COL), 0.0),
        purchased_at=None,
        base_price=parse_int_or_default(_cell(row, BASE_PRICE_COL), 0),
        pool=format_pool(_cell(row, POOL_COL)),
        nationality=classify_nationality(_cell(row, COUNTRY_COL)),
        role=_cell(row, ROLE_COL),
    )


def rows_to_records(
    rows: Sequence[Sequence[str]], id_generator: Optional[IdSource] = None
) -> List[PlayerRecord]:
    return [row_to_record(row, id_generator) for row in rows]


def load_records(
    path: Path | str,
    max_rows: int = MAX_PLAYERS,
    id_generator: Optional[IdSource] = None,
) -> List[PlayerRecord]:
    """
    Read the sheet at ``path`` and transform every data row (at most ``max_rows``).

    Raises ``SourceReadError`` when the sheet cannot be read.
    """
    records = rows_to_records(read_rows(path, max_rows=max_rows), id_generator)
    log.info(
        f"Loaded {len(records)} player(s) from {path}",
        extra={"source": str(path), "players": len(records)},
    )
    return records


__all__ = [
    "classify_nationality",
    "format_pool",
    "load_records",
    "parse_float_or_default",
    "parse_int_or_default",
    "row_to_record",
    "rows_to_records",
]
