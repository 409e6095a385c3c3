"""Starlette / FastAPI transport — Datastar streams as a ``StreamingResponse``.

``stream()`` returns the response immediately; the handler runs in its own
task and every event it emits is queued and yielded by the response body.
Starlette tears the body down when the client disconnects, which is how the
session notices a disconnect.

Usage::

    @router.get("/merge")
    async def merge(request: Request):
        reader = await read_signals(request)
        ...
        return ServerSentEventGenerator.stream(
            lambda sse: sse.patch_elements('<div id="toMerge">Hello</div>')
        )
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable, Mapping
from typing import Any

from starlette.requests import ClientDisconnect, Request
from starlette.responses import StreamingResponse

from datastar_sdk.adapters.base import StreamingGenerator
from datastar_sdk.consts import DATASTAR, SSE_HEADERS
from datastar_sdk.models.options import StreamOptions
from datastar_sdk.models.signals import ReadSignalsResult, SignalsError
from datastar_sdk.services.signals import parse_signals

logger = logging.getLogger(__name__)

# Disconnect callbacks run outside the cancelled response task; keep a
# reference until they finish.
_background_tasks: set[asyncio.Task[None]] = set()


def _collect_failure(runner: asyncio.Task[None]) -> None:
    """Mark a handler failure as retrieved.

    The body iterator re-raises it when it reaches the end of the stream; if
    the client left first nobody awaits the runner.  ``_run`` has already
    logged the traceback either way.
    """
    if not runner.cancelled() and runner.exception() is not None:
        logger.debug("Datastar stream runner finished with %r", runner.exception())


class ServerSentEventGenerator(StreamingGenerator):
    """Datastar generator feeding a Starlette ``StreamingResponse``.

    Not instantiated directly; use :meth:`stream`.
    """

    @classmethod
    def stream(
        cls,
        on_start: Callable[[ServerSentEventGenerator], Any],
        options: StreamOptions | Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> StreamingResponse:
        """Build the SSE response that runs *on_start* once it is served.

        Without an ``on_error`` callback a failing handler's exception is
        raised from the response body after the stream has been ended.
        """
        generator = cls(StreamOptions.coerce(options, **kwargs))
        return StreamingResponse(
            generator._events(on_start),
            status_code=200,
            headers={**SSE_HEADERS, **(headers or {})},
            media_type="text/event-stream",
        )

    async def _events(self, on_start: Callable[[ServerSentEventGenerator], Any]) -> AsyncIterator[str]:
        logger.debug("SSE stream opened")
        runner = asyncio.create_task(self._run(on_start))
        runner.add_done_callback(_collect_failure)
        try:
            while True:
                chunk = await self._queue.get()
                if chunk is None:
                    break
                yield chunk
            # Surfaces the handler's exception when there is no on_error
            await runner
            logger.debug("SSE stream closed")
        finally:
            if not self.closed:
                task = asyncio.get_running_loop().create_task(self._handle_disconnect())
                _background_tasks.add(task)
                task.add_done_callback(_background_tasks.discard)


async def read_signals(request: Request) -> ReadSignalsResult:
    """Read client signals from a Starlette request.

    GET requests read the ``datastar`` query parameter; other methods buffer
    the whole body before parsing it.  Never raises.
    """
    if request.method == "GET":
        return parse_signals(request.query_params.get(DATASTAR))
    try:
        body = await request.body()
    except ClientDisconnect:
        return SignalsError(error="Client disconnected before the request body was received")
    return parse_signals(body)
