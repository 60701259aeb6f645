"""
Infrastructure package for Player Feed.

Centralizes I/O concerns: reading the spreadsheet, posting records over
HTTP and appending to the local audit log. Keep this layer free of
row-mapping and orchestration logic.
"""

from player_feed.infrastructure.audit_log import append_audit_entry, read_audit_entries
from player_feed.infrastructure.http_sender import SendResult, build_client, send_record
from player_feed.infrastructure.sheet_reader import SourceReadError, read_rows

__all__ = [
    "SendResult",
    "SourceReadError",
    "append_audit_entry",
    "build_client",
    "read_audit_entries",
    "read_rows",
    "send_record",
]
