"""Event generator core — Datastar operations rendered as framed SSE lines.

``ServerSentEventGenerator`` is transport-free: every operation validates its
input, builds the data lines and hands them to :meth:`send`, which frames the
event and returns the lines.  Transport adapters subclass it, override
``send`` to also push the joined text onto their connection, and override
``close`` to end the response.

Used on its own it is an in-memory generator, handy for tests and for
writing events into any other stream::

    gen = ServerSentEventGenerator()
    "".join(gen.patch_elements('<div id="a">hi</div>'))
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from datastar_sdk.consts import (
    DATALINE_ELEMENTS,
    DATALINE_SIGNALS,
    ELEMENT_PATCH_MODES,
    ElementPatchMode,
    EventType,
)
from datastar_sdk.errors import InvalidModeError, RequiredParameterError
from datastar_sdk.models.options import (
    EventOptions,
    ExecuteScriptOptions,
    PatchElementsOptions,
    PatchSignalsOptions,
)
from datastar_sdk.services.sse import format_event, option_lines, prefixed_lines, stringify

_AUTO_REMOVE_ATTRIBUTE = 'data-effect="el.remove()"'


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def _require(value: str | None, param_name: str, message: str | None = None) -> str:
    if _is_blank(value):
        raise RequiredParameterError(param_name, message)
    return value  # type: ignore[return-value]


def _validate_mode(mode: ElementPatchMode | str | None) -> str | None:
    if mode is None:
        return None
    value = mode.value if isinstance(mode, Enum) else mode
    if value not in ELEMENT_PATCH_MODES:
        raise InvalidModeError(value, ELEMENT_PATCH_MODES)
    return value


def _script_attributes(attributes: Mapping[str, Any] | Sequence[str]) -> str:
    if isinstance(attributes, Mapping):
        return "".join(f' {key}="{stringify(value)}"' for key, value in attributes.items())
    if attributes:
        return " " + " ".join(attributes)
    return ""


class ServerSentEventGenerator:
    """Builds Datastar SSE events; subclasses deliver them to a client."""

    def __init__(self) -> None:
        self.closed = False

    # ── Primitives ───────────────────────────────────────────

    def send(
        self,
        event_type: EventType | str,
        data_lines: list[str],
        options: EventOptions | None = None,
    ) -> list[str]:
        """Frame one event and return its lines.

        Adapters override this, call ``super().send(...)`` for the lines,
        write ``"".join(lines)`` to their connection and return the lines
        unchanged.
        """
        options = options or EventOptions()
        return format_event(
            event_type,
            data_lines,
            event_id=options.event_id,
            retry_duration=options.retry_duration,
        )

    def close(self) -> None:
        """Close the stream.

        Required to end a stream opened with ``keepalive=True`` before the
        client disconnects.
        """
        self.closed = True

    # ── Elements ─────────────────────────────────────────────

    def patch_elements(
        self,
        elements: str | None,
        options: PatchElementsOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> list[str]:
        """Patch HTML elements into the DOM.

        Examples::

            # Morph #new by id (mode "outer")
            gen.patch_elements('<div id="new">Hello</div>')

            # Append inside #container
            gen.patch_elements('<li>x</li>', selector="#container", mode="append")

            # Remove everything matching a selector
            gen.patch_elements("", selector="#gone", mode="remove")

        Raises:
            InvalidModeError: ``mode`` is not one of the eight patch modes.
            RequiredParameterError: ``elements`` is blank and the call is not
                a removal by selector.
        """
        opts = PatchElementsOptions.coerce(options, **kwargs)
        mode = _validate_mode(opts.mode)
        # Only None and "" count as absent; whitespace is still a selector
        selector = opts.selector or None

        remove_by_selector = mode == ElementPatchMode.REMOVE.value and selector is not None
        if mode == ElementPatchMode.REMOVE.value and selector is None:
            _require(
                elements,
                DATALINE_ELEMENTS,
                "For remove mode without selector, elements parameter with IDs is required",
            )
        elif not remove_by_selector:
            _require(elements, DATALINE_ELEMENTS)

        datalines = option_lines(
            {**opts.dataline_options(), "selector": selector, "mode": mode}
        )
        if not _is_blank(elements):
            datalines.extend(prefixed_lines(DATALINE_ELEMENTS, elements))  # type: ignore[arg-type]

        return self.send(EventType.PATCH_ELEMENTS, datalines, opts)

    def remove_elements(
        self,
        selector: str | None = None,
        elements: str | None = None,
        options: EventOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> list[str]:
        """Remove elements by CSS selector, or by the ids of *elements*.

        Raises:
            RequiredParameterError: neither a selector nor elements were given.
        """
        if not selector and _is_blank(elements):
            raise RequiredParameterError(
                "selector",
                "Either selector or elements (with IDs) must be provided to remove elements.",
            )
        opts = EventOptions.coerce(options, **kwargs)
        return self.patch_elements(
            elements or "",
            PatchElementsOptions(
                selector=selector,
                mode=ElementPatchMode.REMOVE,
                event_id=opts.event_id,
                retry_duration=opts.retry_duration,
            ),
        )

    def execute_script(
        self,
        script: str,
        options: ExecuteScriptOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> list[str]:
        """Run *script* in the browser by appending a ``<script>`` to ``body``.

        With ``auto_remove`` (the default) the tag removes itself once it
        has run.
        """
        opts = ExecuteScriptOptions.coerce(options, **kwargs)
        attrs = _script_attributes(opts.attributes)
        if opts.auto_remove:
            attrs += f" {_AUTO_REMOVE_ATTRIBUTE}"

        return self.patch_elements(
            f"<script{attrs}>{script}</script>",
            PatchElementsOptions(
                selector="body",
                mode=ElementPatchMode.APPEND,
                event_id=opts.event_id,
                retry_duration=opts.retry_duration,
            ),
        )

    # ── Signals ──────────────────────────────────────────────

    def patch_signals(
        self,
        signals: str | Mapping[str, Any],
        options: PatchSignalsOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> list[str]:
        """Merge *signals* into the client store (RFC 7386 JSON Merge Patch).

        *signals* is JSON text; a mapping is serialised compactly first.

        Raises:
            RequiredParameterError: *signals* is blank.
        """
        if isinstance(signals, Mapping):
            signals = json.dumps(signals, separators=(",", ":"), ensure_ascii=False)
        _require(signals, DATALINE_SIGNALS)
        opts = PatchSignalsOptions.coerce(options, **kwargs)

        datalines = option_lines(opts.dataline_options())
        datalines.extend(prefixed_lines(DATALINE_SIGNALS, signals))
        return self.send(EventType.PATCH_SIGNALS, datalines, opts)

    def remove_signals(
        self,
        keys: str | Sequence[str],
        options: PatchSignalsOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> list[str]:
        """Delete signals on the client by patching each key to ``null``."""
        if isinstance(keys, str):
            keys = [keys]
        patch = {key: None for key in keys}
        return self.patch_signals(patch, options, **kwargs)
