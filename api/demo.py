"""Demo API — Datastar streams served through the Starlette adapter.

Endpoints:
- ``GET|POST /merge``  — greet the ``foo`` signal by patching ``#toMerge``
- ``GET /await``       — two patches separated by a delay
- ``GET|POST /test``   — replay ``events`` from the signals (SDK conformance)
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from api.replay import is_event_list, replay_events
from datastar_sdk.adapters.starlette import ServerSentEventGenerator, read_signals
from datastar_sdk.config import get_settings
from datastar_sdk.consts import DATASTAR_REQUEST
from datastar_sdk.services.signals import is_datastar_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["demo"])


@router.api_route("/merge", methods=["GET", "POST"])
async def merge(request: Request) -> Response:
    """Patch ``#toMerge`` with a greeting built from the ``foo`` signal."""
    if not is_datastar_request(request.headers):
        logger.info("/merge called without the %s header", DATASTAR_REQUEST)

    reader = await read_signals(request)
    if not reader.success:
        logger.error("Error while reading signals: %s", reader.error)
        return PlainTextResponse("Error while reading signals", status_code=400)

    if "foo" not in reader.signals:
        logger.error("The foo signal is not present")
        return PlainTextResponse("The foo signal is not present", status_code=400)

    foo = reader.signals["foo"]
    return ServerSentEventGenerator.stream(
        lambda sse: sse.patch_elements(f'<div id="toMerge">Hello {foo}</div>')
    )


@router.get("/await")
async def delayed_merge() -> Response:
    """Patch once, wait, then patch again on the same open stream."""
    delay = get_settings().demo_delay_seconds

    async def on_start(sse: ServerSentEventGenerator) -> None:
        sse.patch_elements('<div id="toMerge">Merged</div>')
        await asyncio.sleep(delay)
        sse.patch_elements('<div id="toMerge">After 10 seconds</div>')

    return ServerSentEventGenerator.stream(on_start)


@router.api_route("/test", methods=["GET", "POST"])
async def conformance(request: Request) -> Response:
    """Replay the ``events`` signal through the generator."""
    reader = await read_signals(request)
    if not reader.success:
        return PlainTextResponse(reader.error, status_code=400)

    events = reader.signals.get("events")
    if not is_event_list(events):
        return PlainTextResponse("events must be a list of typed objects", status_code=400)

    return ServerSentEventGenerator.stream(lambda sse: replay_events(sse, events))
