"""Stream session lifecycle shared by the transport adapters.

A session owns one SSE connection.  Events produced by the generator are
queued as text; the adapter drains the queue onto its transport.  ``None`` on
the queue marks the end of the response.

Lifecycle:
    handler returns  → close, unless ``keepalive``
    handler raises   → on_abort → on_error (then close) or close and re-raise
    client leaves    → cancel a running handler → on_abort → close
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any

from datastar_sdk.consts import EventType
from datastar_sdk.models.options import EventOptions, StreamOptions
from datastar_sdk.services.generator import ServerSentEventGenerator

logger = logging.getLogger(__name__)


async def maybe_await(value: Any) -> Any:
    """Await *value* if the callback handed back an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


class StreamingGenerator(ServerSentEventGenerator):
    """Generator bound to a live connection through an outgoing queue."""

    def __init__(self, options: StreamOptions | None = None) -> None:
        super().__init__()
        self.options = options or StreamOptions()
        self.disconnected = False
        self._queue: asyncio.Queue[str | None] = asyncio.Queue()
        self._handler: asyncio.Future[Any] | None = None
        self._aborted = False

    def send(
        self,
        event_type: EventType | str,
        data_lines: list[str],
        options: EventOptions | None = None,
    ) -> list[str]:
        lines = super().send(event_type, data_lines, options)
        if self.closed:
            logger.debug("Dropping %s event, stream already closed", event_type)
        else:
            # Joined so each event goes out as one chunk
            self._queue.put_nowait("".join(lines))
        return lines

    def close(self) -> None:
        if self.closed:
            return
        super().close()
        self._queue.put_nowait(None)

    async def _abort(self) -> None:
        if self._aborted:
            return
        self._aborted = True
        if self.options.on_abort is not None:
            await maybe_await(self.options.on_abort())

    async def _run(self, on_start: Callable[[Any], Any]) -> None:
        """Run the caller's handler and settle the connection afterwards."""

        async def call_handler() -> Any:
            return await maybe_await(on_start(self))

        self._handler = asyncio.ensure_future(call_handler())
        try:
            await self._handler
        except asyncio.CancelledError:
            if not self.disconnected:
                raise
            return
        except Exception as exc:
            logger.exception("Datastar stream handler failed")
            await self._abort()
            try:
                if self.options.on_error is None:
                    raise
                await maybe_await(self.options.on_error(exc))
            finally:
                self.close()
            return

        if not self.options.keepalive:
            self.close()

    async def _handle_disconnect(self) -> None:
        """Client went away: stop the handler, notify, release the stream."""
        if self.closed:
            return
        logger.info("Datastar client disconnected")
        self.disconnected = True
        if self._handler is not None and not self._handler.done():
            self._handler.cancel()
        try:
            await self._abort()
        finally:
            self.close()
