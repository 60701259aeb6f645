"""
Driver that feeds the auction server from the player sheet.

Usage (example from CLI):
    from player_feed.orchestrator import run_batch

    results = run_batch()
    print([r["ok"] for r in results])

The whole bounded record list is built before the first request goes out.
Records are then sent one at a time; a failed record is logged and skipped
and the batch always runs to the end. Audit log appends are a separate step
after each send so a local write failure is never reported as a network one.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import httpx

from player_feed.config import AUDIT_LOG_PATH, MAX_PLAYERS, PLAYER_ENDPOINT, SOURCE_PATH
from player_feed.domain.models import PlayerRecord
from player_feed.infrastructure.audit_log import append_audit_entry
from player_feed.infrastructure.http_sender import SendResult, build_client, send_record
from player_feed.transform import IdSource, load_records
from player_feed.utils.logging import get_logger

log = get_logger(__name__)


def _append_audit(record: PlayerRecord, audit_path: Path | str) -> bool:
    try:
        append_audit_entry(record, audit_path)
    except OSError as exc:
        log.warning(
            f"Error appending player {record.name} to audit log: {exc}",
            extra={"player": record.name, "player_id": record.identifier},
        )
        return False
    return True


def send_all(
    records: List[PlayerRecord],
    client: httpx.Client,
    endpoint: str = PLAYER_ENDPOINT,
    audit_path: Path | str = AUDIT_LOG_PATH,
    audit: bool = True,
) -> List[SendResult]:
    """
    Send ``records`` in order; one failure never stops the rest.
    """
    results: List[SendResult] = []
    for record in records:
        result = send_record(record, client=client, endpoint=endpoint)

        # Only requests that reached the server are recorded.
        if audit and result["status_code"] is not None:
            _append_audit(record, audit_path)

        if result["ok"]:
            log.info(
                f"Successfully sent player: {record.name}",
                extra={"player": record.name, "player_id": record.identifier},
            )
        else:
            log.warning(
                f"Error sending player {record.name}: {result['error']}",
                extra={
                    "player": record.name,
                    "player_id": record.identifier,
                    "status_code": result["status_code"],
                },
            )
        results.append(result)
    return results


def run_batch(
    source_path: Path | str = SOURCE_PATH,
    endpoint: str = PLAYER_ENDPOINT,
    audit_path: Path | str = AUDIT_LOG_PATH,
    max_rows: int = MAX_PLAYERS,
    client: Optional[httpx.Client] = None,
    id_generator: Optional[IdSource] = None,
    audit: bool = True,
) -> List[SendResult]:
    """
    Read the sheet, transform it and send every record.

    Parameters
    ----------
    source_path : Path | str
        Spreadsheet to read (first sheet, header skipped).
    endpoint : str
        Player endpoint URL.
    audit_path : Path | str
        NDJSON audit log, appended to for every record that got a response.
    max_rows : int
        Row cap applied by the reader.
    client : httpx.Client | None
        HTTP client to use. When None, one is built and closed here.
    id_generator : Callable[[], str] | None
        Identifier source; defaults to the process-wide generator.
    audit : bool
        Whether to append to the audit log at all.

    Returns
    -------
    List[SendResult]
        One result per record, in sheet order.

    Raises
    ------
    SourceReadError
        If the sheet cannot be read. Nothing is sent or logged in that case.
    """
    records = load_records(source_path, max_rows=max_rows, id_generator=id_generator)

    owns_client = client is None
    http = client or build_client()
    try:
        results = send_all(records, http, endpoint=endpoint, audit_path=audit_path, audit=audit)
    finally:
        if owns_client:
            http.close()

    failed = sum(1 for r in results if not r["ok"])
    log.debug(
        f"Batch finished: {len(results) - failed} sent, {failed} failed",
        extra={"sent": len(results) - failed, "failed": failed},
    )
    return results


__all__ = ["run_batch", "send_all"]
