"""
Spreadsheet reader for Player Feed.

Opens an .xlsx workbook with openpyxl, takes the first sheet, drops the
header row and returns the data rows as lists of cell strings, capped at a
fixed number of rows. The workbook is always closed before returning.
"""

from __future__ import annotations

from contextlib import closing
from itertools import islice
from pathlib import Path
from typing import Any, List

from openpyxl import load_workbook

from player_feed.config import MAX_PLAYERS
from player_feed.utils.logging import get_logger

log = get_logger(__name__)


class SourceReadError(RuntimeError):
    """
    The spreadsheet could not be opened or its rows could not be extracted.
    """

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Error reading {self.path}: {cause}")


def _cell_to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def read_rows(path: Path | str, max_rows: int = MAX_PLAYERS) -> List[List[str]]:
    """
    Return up to ``max_rows`` data rows from the first sheet of ``path``.

    Raises
    ------
    SourceReadError
        If the workbook cannot be opened or its rows cannot be read.
    """
    try:
        workbook = load_workbook(filename=str(path), read_only=True, data_only=True)
    except Exception as exc:  # noqa: BLE001 - openpyxl raises a wide range of types
        raise SourceReadError(path, exc) from exc

    with closing(workbook):
        try:
            sheet = workbook.worksheets[0]
            rows = sheet.iter_rows(values_only=True)
            header = next(rows, None)
            if header is None:
                log.warning("Sheet is empty", extra={"source": str(path)})
                return []
            data = [
                [_cell_to_str(cell) for cell in row] for row in islice(rows, max(max_rows, 0))
            ]
        except Exception as exc:  # noqa: BLE001
            raise SourceReadError(path, exc) from exc

    log.debug(
        f"Read {len(data)} row(s) from {path} (sheet={sheet.title})",
        extra={"source": str(path), "rows": len(data)},
    )
    return data


__all__ = ["SourceReadError", "read_rows"]
