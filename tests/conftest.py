"""Shared pytest fixtures and helpers for the Datastar SDK tests.

Provides:
- ``gen``: in-memory generator (no transport)
- ``client``: httpx AsyncClient bound to the demo FastAPI app
- ``parse_events``: split raw SSE text into ``{"event", "id", "retry", "data"}`` dicts
"""

from __future__ import annotations

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from datastar_sdk.services.generator import ServerSentEventGenerator


def parse_events(raw_text: str) -> list[dict[str, Any]]:
    """Parse SSE text into one dict per event; comment lines are ignored."""
    events: list[dict[str, Any]] = []
    current: dict[str, Any] = {"data": []}
    for line in raw_text.split("\n"):
        if line == "":
            if len(current) > 1 or current["data"]:
                events.append(current)
            current = {"data": []}
            continue
        if line.startswith(":"):
            continue
        field, _, value = line.partition(": ")
        if field == "data":
            current["data"].append(value)
        else:
            current[field] = value
    return events


@pytest.fixture
def gen() -> ServerSentEventGenerator:
    """Fresh transport-free generator."""
    return ServerSentEventGenerator()


@pytest.fixture
async def client():
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
