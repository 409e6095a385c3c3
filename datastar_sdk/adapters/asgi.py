"""Raw ASGI transport — Datastar streams over ``scope / receive / send``.

For plain ASGI callables and middleware-style apps that talk to the server
directly instead of through a framework response object.  The generator
writes ``http.response.start`` itself, pushes one body chunk per event and
watches ``receive()`` for ``http.disconnect``.

Usage::

    async def app(scope, receive, send):
        reader = await read_signals(scope, receive)
        if not reader.success:
            ...
        await ServerSentEventGenerator.stream(
            scope, receive, send,
            lambda sse: sse.patch_elements(f'<div id="toMerge">Hello {reader.signals["foo"]}</div>'),
        )

Read the signals *before* calling ``stream``: once the stream is open the
disconnect watcher owns ``receive``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

from starlette.types import Message, Receive, Scope, Send

from datastar_sdk.adapters.base import StreamingGenerator
from datastar_sdk.consts import SSE_HEADERS
from datastar_sdk.models.options import StreamOptions
from datastar_sdk.models.signals import ReadSignalsResult, SignalsError
from datastar_sdk.services.signals import parse_signals, signals_from_query

logger = logging.getLogger(__name__)


class ServerSentEventGenerator(StreamingGenerator):
    """Datastar generator bound to one raw ASGI HTTP connection.

    Not instantiated directly; use :meth:`stream`.
    """

    def __init__(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
        options: StreamOptions | None = None,
    ) -> None:
        super().__init__(options)
        self._scope = scope
        self._receive = receive
        self._send = send
        self._writer: asyncio.Task[None] | None = None

    @classmethod
    async def stream(
        cls,
        scope: Scope,
        receive: Receive,
        send: Send,
        on_start: Callable[[ServerSentEventGenerator], Any],
        options: StreamOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Open an SSE response, run *on_start* and return once it has ended.

        The response is ended when *on_start* returns, unless ``keepalive``
        is set; then it stays open until :meth:`close` or client disconnect.
        Without an ``on_error`` callback a failing handler's exception is
        re-raised here after the response has been ended.
        """
        generator = cls(scope, receive, send, StreamOptions.coerce(options, **kwargs))
        await generator._open()
        watcher = asyncio.create_task(generator._watch_disconnect())
        try:
            await generator._run(on_start)
        except BaseException:
            generator.close()
            raise
        finally:
            await generator._wait_closed()
            watcher.cancel()
            try:
                await watcher
            except asyncio.CancelledError:
                pass

    async def _open(self) -> None:
        headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in SSE_HEADERS.items()
        ]
        await self._send({"type": "http.response.start", "status": 200, "headers": headers})
        # Empty chunk flushes the headers so the client does not time out
        await self._send({"type": "http.response.body", "body": b"", "more_body": True})
        self._writer = asyncio.create_task(self._drain())
        logger.debug("SSE stream opened for %s", self._scope.get("path", ""))

    async def _drain(self) -> None:
        try:
            while True:
                chunk = await self._queue.get()
                if chunk is None:
                    break
                await self._send(
                    {"type": "http.response.body", "body": chunk.encode("utf-8"), "more_body": True}
                )
            await self._send({"type": "http.response.body", "body": b"", "more_body": False})
        except OSError as exc:
            logger.info("SSE write failed, client gone: %s", exc)
            self.disconnected = True
        logger.debug("SSE stream closed for %s", self._scope.get("path", ""))

    async def _wait_closed(self) -> None:
        """Block until the response has been ended by close or disconnect."""
        if self._writer is not None:
            await self._writer

    async def _watch_disconnect(self) -> None:
        while True:
            message: Message = await self._receive()
            if message["type"] == "http.disconnect":
                break
        await self._handle_disconnect()


async def read_signals(scope: Scope, receive: Receive) -> ReadSignalsResult:
    """Read client signals from a raw ASGI request.

    GET requests read the ``datastar`` query parameter; other methods buffer
    the whole body before parsing it.  Never raises.
    """
    if scope.get("method", "GET").upper() == "GET":
        return signals_from_query(scope.get("query_string", b""))

    body = bytearray()
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            return SignalsError(error="Client disconnected before the request body was received")
        body.extend(message.get("body", b""))
        if not message.get("more_body", False):
            break
    return parse_signals(bytes(body))
