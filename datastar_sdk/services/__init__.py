from datastar_sdk.services.generator import ServerSentEventGenerator
from datastar_sdk.services.signals import (
    is_datastar_request,
    parse_signals,
    read_signals,
    signals_from_query,
)
from datastar_sdk.services.sse import format_event, option_lines, prefixed_lines

__all__ = [
    "ServerSentEventGenerator",
    "format_event",
    "is_datastar_request",
    "option_lines",
    "parse_signals",
    "prefixed_lines",
    "read_signals",
    "signals_from_query",
]
