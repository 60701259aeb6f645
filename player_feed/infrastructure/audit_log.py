"""
Append-only audit log of sent players.

One compact JSON object per line: ``{"playerName": ..., "playerId": ...}``.
The file is opened in append mode for every entry and closed straight after.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from player_feed.config import AUDIT_LOG_PATH
from player_feed.domain.models import PlayerRecord


def append_audit_entry(record: PlayerRecord, path: Path | str = AUDIT_LOG_PATH) -> None:
    """
    Append the record's name/identifier pair to ``path``, creating the file if needed.

    Raises OSError when the file cannot be opened or written.
    """
    line = json.dumps(record.audit_entry(), separators=(",", ":"))
    with Path(path).open("a", encoding="utf-8") as f:
        f.write(line + "\n")


def read_audit_entries(path: Path | str = AUDIT_LOG_PATH) -> List[Dict[str, str]]:
    audit_path = Path(path)
    if not audit_path.exists():
        return []
    with audit_path.open("r", encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


__all__ = ["AUDIT_LOG_PATH", "append_audit_entry", "read_audit_entries"]
