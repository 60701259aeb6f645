"""
Pytest configuration for Player Feed.

Provides fixtures for:
- Writing throwaway auction sheets into tmp_path
- Fake player servers built on httpx.MockTransport
- A seeded identifier generator and a clean process-wide generator
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Generator, Iterable, List, Sequence

import httpx
import pytest

from player_feed.ids import PlayerIdGenerator, reset_id_generator
from scripts.generate_sheet import _write_sheet


class FakePlayerServer:
    """
    Records every request and answers with scripted status codes.

    ``statuses`` is consumed in order; once exhausted every request gets 200.
    A status of None makes the transport raise ``httpx.ConnectError``.
    """

    def __init__(self, statuses: Iterable[int | None] = ()) -> None:
        self._statuses = list(statuses)
        self.requests: List[httpx.Request] = []

    @property
    def payloads(self) -> List[dict]:
        return [json.loads(r.content) for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status = self._statuses.pop(0) if self._statuses else 200
        if status is None:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(status, json={"ok": status == 200})

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture(autouse=True)
def clean_id_generator() -> Generator[None, None, None]:
    reset_id_generator()
    yield
    reset_id_generator()


@pytest.fixture
def id_generator() -> PlayerIdGenerator:
    return PlayerIdGenerator(seed=1234)


@pytest.fixture
def sheet_factory(tmp_path: Path) -> Callable[..., Path]:
    """
    Return a callable that writes rows (header added) to a fresh .xlsx file.
    """
    counter = {"n": 0}

    def _make(rows: Sequence[Sequence[object]], name: str | None = None) -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"sheet-{counter['n']}.xlsx")
        _write_sheet(path, rows)
        return path

    return _make


@pytest.fixture
def fake_server() -> Callable[..., FakePlayerServer]:
    def _make(statuses: Iterable[int | None] = ()) -> FakePlayerServer:
        return FakePlayerServer(statuses)

    return _make


@pytest.fixture
def audit_path(tmp_path: Path) -> Path:
    return tmp_path / "players.json"
