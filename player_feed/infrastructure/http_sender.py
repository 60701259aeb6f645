"""
HTTP sender for player records.

Posts one record per request to the auction server. A single attempt is
made; every failure mode (serialization, transport, non-200 status) is
reported through the returned SendResult instead of being raised.
"""

from __future__ import annotations

import json
from typing import Optional, TypedDict

import httpx

from player_feed.config import PLAYER_ENDPOINT
from player_feed.domain.models import PlayerRecord


class SendResult(TypedDict):
    """
    Outcome of one submission.

    ``status_code`` is None when no response arrived.
    """

    player_name: str
    player_id: str
    ok: bool
    status_code: Optional[int]
    error: Optional[str]


def build_client() -> httpx.Client:
    """Default client; transport defaults apply (no retries)."""
    return httpx.Client()


def _result(
    record: PlayerRecord, status_code: Optional[int] = None, error: Optional[str] = None
) -> SendResult:
    return SendResult(
        player_name=record.name,
        player_id=record.identifier,
        ok=error is None,
        status_code=status_code,
        error=error,
    )


def send_record(
    record: PlayerRecord,
    client: Optional[httpx.Client] = None,
    endpoint: str = PLAYER_ENDPOINT,
) -> SendResult:
    """
    POST ``record`` as JSON to ``endpoint``. Success means HTTP 200 exactly.
    """
    try:
        body = json.dumps(record.to_payload(), allow_nan=False)
    except (TypeError, ValueError) as exc:
        return _result(record, error=f"error marshaling player data: {exc}")

    owns_client = client is None
    http = client or build_client()
    try:
        response = http.post(
            endpoint,
            content=body,
            headers={"Content-Type": "application/json"},
        )
    except httpx.HTTPError as exc:
        return _result(record, error=f"error sending request: {exc}")
    finally:
        if owns_client:
            http.close()

    if response.status_code != httpx.codes.OK:
        return _result(
            record,
            status_code=response.status_code,
            error=f"server returned status: {response.status_code} {response.reason_phrase}",
        )
    return _result(record, status_code=response.status_code)


__all__ = ["PLAYER_ENDPOINT", "SendResult", "build_client", "send_record"]
