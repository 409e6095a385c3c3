"""SSE framing — turns an event type and data lines into wire text.

Every function returns a list of ``\\n``-terminated lines; joining them gives
the exact bytes written to the connection::

    event: datastar-patch-elements
    id: 42                           (only when an event id is given)
    retry: 3000                      (only when != 1000)
    data: mode inner
    data: elements <div id="a">...</div>

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from datastar_sdk.consts import DEFAULT_MAPPING, DEFAULT_SSE_RETRY_DURATION_MS


def stringify(value: Any) -> str:
    """Render an option value the way the browser client expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def prefixed_lines(prefix: str, value: str) -> list[str]:
    """One ``"<prefix> <line>"`` entry per physical line of *value*."""
    return [f"{prefix} {line}" for line in value.split("\n")]


def has_default_value(key: str, value: Any) -> bool:
    if key not in DEFAULT_MAPPING:
        return False
    if isinstance(value, Enum):
        value = value.value
    default = DEFAULT_MAPPING[key]
    # bool is an int subclass; keep True from matching 1 and vice versa
    return type(value) is type(default) and value == default


def option_lines(options: Mapping[str, Any]) -> list[str]:
    """Data lines for every option that is set and not at its default."""
    lines: list[str] = []
    for key, value in options.items():
        if value is None or has_default_value(key, value):
            continue
        lines.extend(prefixed_lines(key, stringify(value)))
    return lines


def format_event(
    event_type: str | Enum,
    data_lines: Iterable[str],
    *,
    event_id: str | None = None,
    retry_duration: int | None = None,
) -> list[str]:
    """Frame one SSE event and return its lines, blank terminator included."""
    lines = [f"event: {stringify(event_type)}\n"]
    if event_id:
        lines.append(f"id: {event_id}\n")
    if retry_duration and retry_duration != DEFAULT_SSE_RETRY_DURATION_MS:
        lines.append(f"retry: {retry_duration}\n")
    lines.extend(f"data: {line}\n" for line in data_lines)
    lines.append("\n")
    return lines
