"""Datastar SDK — Server-Sent Event generation and signal reading for ASGI apps.

Emit Datastar events (patch elements, patch signals, execute script, remove
elements, remove signals) and read the signals the browser sends back.

Quick start (FastAPI / Starlette)::

    from datastar_sdk.adapters.starlette import ServerSentEventGenerator, read_signals

    @app.get("/merge")
    async def merge(request):
        reader = await read_signals(request)
        return ServerSentEventGenerator.stream(
            lambda sse: sse.patch_elements(f'<div id="toMerge">Hello {reader.signals["foo"]}</div>')
        )

Raw ASGI apps use ``datastar_sdk.adapters.asgi`` with the same API.
"""

from datastar_sdk.consts import (
    DATASTAR,
    DATASTAR_REQUEST,
    VERSION,
    ElementPatchMode,
    EventType,
    NamespaceType,
)
from datastar_sdk.errors import (
    DatastarError,
    InvalidModeError,
    RequiredParameterError,
    SignalParseError,
)
from datastar_sdk.models import (
    ExecuteScriptOptions,
    PatchElementsOptions,
    PatchSignalsOptions,
    ReadSignalsResult,
    SignalsError,
    SignalsRead,
    StreamOptions,
)
from datastar_sdk.services import ServerSentEventGenerator, format_event, parse_signals

__version__ = "0.1.0"
__all__ = [
    "DATASTAR",
    "DATASTAR_REQUEST",
    "VERSION",
    "DatastarError",
    "ElementPatchMode",
    "EventType",
    "ExecuteScriptOptions",
    "InvalidModeError",
    "NamespaceType",
    "PatchElementsOptions",
    "PatchSignalsOptions",
    "ReadSignalsResult",
    "RequiredParameterError",
    "ServerSentEventGenerator",
    "SignalParseError",
    "SignalsError",
    "SignalsRead",
    "StreamOptions",
    "__version__",
    "format_event",
    "parse_signals",
]
