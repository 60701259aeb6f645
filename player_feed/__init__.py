"""
Player Feed - push an auction player sheet to the player server.

Reads the first sheet of the auction spreadsheet, normalizes each row into a
player record (rating and base price parsing, pool code stripping,
nationality bucketing), assigns a generated ``PL####`` identifier, and posts
the records one at a time to the local player endpoint while keeping an
append-only audit log of name/ID pairs.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from player_feed.config import Settings, get_settings
from player_feed.domain.models import PlayerRecord
from player_feed.ids import PlayerIdGenerator, get_id_generator
from player_feed.infrastructure.http_sender import SendResult, send_record
from player_feed.infrastructure.sheet_reader import SourceReadError, read_rows
from player_feed.orchestrator import run_batch
from player_feed.transform import load_records, row_to_record
from player_feed.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "PlayerRecord",
    "PlayerIdGenerator",
    "get_id_generator",
    # Pipeline
    "SourceReadError",
    "read_rows",
    "row_to_record",
    "load_records",
    "SendResult",
    "send_record",
    "run_batch",
    # Logging
    "configure_logging",
    "get_logger",
]
