"""Demo endpoint tests using httpx.AsyncClient."""

import json
import logging

import pytest

from datastar_sdk.config import get_settings

from conftest import parse_events

MERGE_WORLD = (
    "event: datastar-patch-elements\n"
    'data: elements <div id="toMerge">Hello World</div>\n'
    "\n"
)

REPLAY_EVENTS = [
    {
        "type": "patchElements",
        "elements": '<div id="feed">x</div>',
        "selector": "#feed",
        "mode": "inner",
        "eventId": "1",
    },
    {"type": "removeElements", "selector": "#old"},
    {"type": "patchSignals", "signals": {"count": 1}, "onlyIfMissing": True},
    {"type": "patchSignals", "signals-raw": '{"raw":true}'},
    {"type": "removeSignals", "paths": ["count"]},
    {"type": "executeScript", "script": "go()", "autoRemove": False},
]

REPLAY_EXPECTED = [
    {
        "event": "datastar-patch-elements",
        "id": "1",
        "data": ["mode inner", "selector #feed", 'elements <div id="feed">x</div>'],
    },
    {"event": "datastar-patch-elements", "data": ["mode remove", "selector #old"]},
    {"event": "datastar-patch-signals", "data": ["onlyIfMissing true", 'signals {"count":1}']},
    {"event": "datastar-patch-signals", "data": ['signals {"raw":true}']},
    {"event": "datastar-patch-signals", "data": ['signals {"count":null}']},
    {
        "event": "datastar-patch-elements",
        "data": ["mode append", "selector body", "elements <script>go()</script>"],
    },
]


# ── Page ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_index_page(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert 'id="toMerge"' in resp.text
    assert "@get('/merge')" in resp.text
    assert get_settings().client_bundle_url in resp.text


# ── /merge ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_merge_get(client):
    resp = await client.get("/merge", params={"datastar": '{"foo":"World"}'})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/event-stream")
    assert resp.text == MERGE_WORLD


@pytest.mark.asyncio
async def test_merge_post(client):
    resp = await client.post("/merge", json={"foo": "World"})
    assert resp.status_code == 200
    assert resp.text == MERGE_WORLD


@pytest.mark.asyncio
async def test_merge_invalid_signals(client):
    resp = await client.post("/merge", content=b"not json")
    assert resp.status_code == 400
    assert resp.text == "Error while reading signals"


@pytest.mark.asyncio
async def test_merge_missing_foo(client):
    resp = await client.get("/merge", params={"datastar": '{"bar":1}'})
    assert resp.status_code == 400
    assert resp.text == "The foo signal is not present"


@pytest.mark.asyncio
async def test_merge_logs_non_datastar_caller(client, caplog):
    with caplog.at_level(logging.INFO, logger="api.demo"):
        await client.get("/merge", params={"datastar": '{"foo":"World"}'})
    assert "without the Datastar-Request header" in caplog.text


@pytest.mark.asyncio
async def test_merge_datastar_caller_not_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="api.demo"):
        resp = await client.get(
            "/merge",
            params={"datastar": '{"foo":"World"}'},
            headers={"Datastar-Request": "true"},
        )
    assert resp.text == MERGE_WORLD
    assert "without the Datastar-Request header" not in caplog.text


# ── /await ───────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_await_sends_two_patches(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "demo_delay_seconds", 0)
    resp = await client.get("/await")
    events = parse_events(resp.text)
    assert [e["data"] for e in events] == [
        ['elements <div id="toMerge">Merged</div>'],
        ['elements <div id="toMerge">After 10 seconds</div>'],
    ]


# ── /test replay ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_replay_post(client):
    resp = await client.post("/test", json={"events": REPLAY_EVENTS})
    assert resp.status_code == 200
    assert parse_events(resp.text) == REPLAY_EXPECTED


@pytest.mark.asyncio
async def test_replay_get(client):
    resp = await client.get("/test", params={"datastar": json.dumps({"events": REPLAY_EVENTS})})
    assert parse_events(resp.text) == REPLAY_EXPECTED


@pytest.mark.asyncio
async def test_replay_rejects_untyped_events(client):
    resp = await client.post("/test", json={"events": [{"elements": "<p></p>"}]})
    assert resp.status_code == 400


# ── Raw ASGI mount ───────────────────────────────────────────


@pytest.mark.asyncio
async def test_asgi_merge(client):
    resp = await client.get("/asgi/merge", params={"datastar": '{"foo":"World"}'})
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "text/event-stream"
    assert resp.text == MERGE_WORLD


@pytest.mark.asyncio
async def test_asgi_merge_post_missing_foo(client):
    resp = await client.post("/asgi/merge", json={"other": 1})
    assert resp.status_code == 400
    assert resp.text == "The foo signal is not present"


@pytest.mark.asyncio
async def test_asgi_replay(client):
    resp = await client.post("/asgi/test", json={"events": REPLAY_EVENTS})
    assert parse_events(resp.text) == REPLAY_EXPECTED


@pytest.mark.asyncio
async def test_asgi_index_points_at_mounted_merge(client):
    resp = await client.get("/asgi/")
    assert resp.status_code == 200
    assert "@get('/asgi/merge')" in resp.text


@pytest.mark.asyncio
async def test_asgi_unknown_path(client):
    resp = await client.get("/asgi/nope")
    assert resp.status_code == 404
