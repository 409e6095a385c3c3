"""Plain ASGI demo app — the same ``/merge`` and ``/test`` flows without a framework.

Uses the raw ASGI adapter directly; ``main.py`` mounts it under ``/asgi``.
It can also be served on its own::

    uvicorn api.raw_asgi:app
"""

from __future__ import annotations

import logging

from starlette.types import Receive, Scope, Send

from api.pages import render_index
from api.replay import is_event_list, replay_events
from datastar_sdk.adapters.asgi import ServerSentEventGenerator, read_signals

logger = logging.getLogger(__name__)


async def _respond(send: Send, status: int, body: str, content_type: str = "text/plain") -> None:
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [(b"content-type", f"{content_type}; charset=utf-8".encode())],
        }
    )
    await send({"type": "http.response.body", "body": body.encode("utf-8")})


async def app(scope: Scope, receive: Receive, send: Send) -> None:
    if scope["type"] != "http":
        return

    path = scope["path"].rstrip("/")
    root_path = scope.get("root_path", "").rstrip("/")

    if path.endswith("/merge"):
        reader = await read_signals(scope, receive)
        if not reader.success:
            logger.error("Error while reading signals: %s", reader.error)
            await _respond(send, 400, "Error while reading signals")
            return
        if "foo" not in reader.signals:
            logger.error("The foo signal is not present")
            await _respond(send, 400, "The foo signal is not present")
            return

        foo = reader.signals["foo"]
        await ServerSentEventGenerator.stream(
            scope,
            receive,
            send,
            lambda sse: sse.patch_elements(f'<div id="toMerge">Hello {foo}</div>'),
        )
    elif path.endswith("/test"):
        reader = await read_signals(scope, receive)
        if not reader.success:
            await _respond(send, 400, reader.error)
            return
        events = reader.signals.get("events")
        if not is_event_list(events):
            await _respond(send, 400, "events must be a list of typed objects")
            return

        await ServerSentEventGenerator.stream(
            scope, receive, send, lambda sse: replay_events(sse, events)
        )
    elif path in ("", root_path):
        await _respond(send, 200, render_index(f"{root_path}/merge"), "text/html")
    else:
        await _respond(send, 404, f"Path not found: {scope['path']}")
