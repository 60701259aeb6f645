from __future__ import annotations

import json

import httpx

from player_feed.domain.models import PlayerRecord
from player_feed.infrastructure.http_sender import PLAYER_ENDPOINT, send_record

WIRE_KEYS = [
    "playerName",
    "playerId",
    "rating",
    "boughtAt",
    "basePrice",
    "pocket",
    "nationality",
    "role",
]


def _record() -> PlayerRecord:
    return PlayerRecord(
        name="Raj Sharma",
        identifier="PL0042",
        rating=8.5,
        base_price=200,
        pool="1",
        nationality="Indian",
        role="Batsman",
    )


def test_send_record_posts_json_payload(fake_server) -> None:
    server = fake_server()

    with server.client() as client:
        result = send_record(_record(), client=client)

    assert result == {
        "player_name": "Raj Sharma",
        "player_id": "PL0042",
        "ok": True,
        "status_code": 200,
        "error": None,
    }
    (request,) = server.requests
    assert request.method == "POST"
    assert str(request.url) == PLAYER_ENDPOINT
    assert request.headers["content-type"] == "application/json"
    payload = json.loads(request.content)
    assert list(payload) == WIRE_KEYS
    assert payload == {
        "playerName": "Raj Sharma",
        "playerId": "PL0042",
        "rating": 8.5,
        "boughtAt": None,
        "basePrice": 200,
        "pocket": "1",
        "nationality": "Indian",
        "role": "Batsman",
    }


def test_send_record_non_200_is_failure(fake_server) -> None:
    server = fake_server([201])

    with server.client() as client:
        result = send_record(_record(), client=client)

    assert result["ok"] is False
    assert result["status_code"] == 201
    assert "server returned status: 201" in result["error"]


def test_send_record_server_error_is_failure(fake_server) -> None:
    server = fake_server([500])

    with server.client() as client:
        result = send_record(_record(), client=client)

    assert result["ok"] is False
    assert result["status_code"] == 500


def test_send_record_transport_error_is_reported_not_raised(fake_server) -> None:
    server = fake_server([None])

    with server.client() as client:
        result = send_record(_record(), client=client)

    assert result["ok"] is False
    assert result["status_code"] is None
    assert result["error"].startswith("error sending request:")


def test_send_record_makes_a_single_attempt(fake_server) -> None:
    server = fake_server([503, 503])

    with server.client() as client:
        send_record(_record(), client=client)

    assert len(server.requests) == 1


def test_send_record_honours_custom_endpoint(fake_server) -> None:
    server = fake_server()

    with server.client() as client:
        send_record(_record(), client=client, endpoint="http://auction.test:9000/api/player")

    assert server.requests[0].url.host == "auction.test"
    assert server.requests[0].url.port == 9000


def test_send_record_without_client_reports_connection_failure(monkeypatch) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    monkeypatch.setattr(
        "player_feed.infrastructure.http_sender.build_client",
        lambda: httpx.Client(transport=httpx.MockTransport(refuse)),
    )

    result = send_record(_record())

    assert result["ok"] is False
    assert "refused" in result["error"]


def test_send_record_rejects_non_finite_rating_before_sending(fake_server) -> None:
    server = fake_server()
    record = PlayerRecord(
        name="Overflow",
        identifier="PL0013",
        rating=float("inf"),
        nationality="Foreign",
    )

    with server.client() as client:
        result = send_record(record, client=client)

    assert result["ok"] is False
    assert result["status_code"] is None
    assert result["error"].startswith("error marshaling player data:")
    assert server.requests == []
