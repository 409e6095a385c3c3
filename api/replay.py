"""Replay a list of described events through a generator.

Backs the ``/test`` endpoints: the client posts (or GETs) signals of the form
``{"events": [{"type": "patchElements", "elements": "...", ...}, ...]}`` and
each entry is turned into the matching generator call.  Keys other than the
payload ones are passed through as options (``mode``, ``eventId``, ...).
"""

from __future__ import annotations

import logging
from typing import Any

from datastar_sdk.consts import DATALINE_PATHS
from datastar_sdk.services.generator import ServerSentEventGenerator

logger = logging.getLogger(__name__)


def is_event_list(events: Any) -> bool:
    """True when *events* is a list of objects that each carry a string ``type``."""
    return isinstance(events, list) and all(
        isinstance(event, dict) and isinstance(event.get("type"), str) for event in events
    )


def replay_events(sse: ServerSentEventGenerator, events: list[dict[str, Any]]) -> None:
    for event in events:
        options = dict(event)
        kind = options.pop("type")

        if kind == "patchElements":
            elements = options.pop("elements", None) or ""
            sse.patch_elements(elements, options)
        elif kind == "removeElements":
            selector = options.pop("selector", None)
            elements = options.pop("elements", None)
            sse.remove_elements(selector, elements, options)
        elif kind == "patchSignals":
            raw = options.pop("signals-raw", None)
            signals = options.pop("signals", None)
            if raw:
                sse.patch_signals(raw, options)
            elif signals:
                sse.patch_signals(signals, options)
        elif kind == "removeSignals":
            paths = options.pop(DATALINE_PATHS, [])
            sse.remove_signals(paths, options)
        elif kind == "executeScript":
            script = options.pop("script", "")
            sse.execute_script(script, options)
        else:
            logger.warning("Skipping unknown event type %r", kind)
