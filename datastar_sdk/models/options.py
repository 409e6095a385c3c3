"""Option models for the generator operations and the stream controller.

Each model lists every recognised option with its default.  Option data
lines are rendered from ``dataline_options()``; fields still equal to their
entry in ``DEFAULT_MAPPING`` are dropped before they reach the wire.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import Field

from datastar_sdk.consts import (
    DATALINE_NAMESPACE,
    DATALINE_ONLY_IF_MISSING,
    DATALINE_PATCH_MODE,
    DATALINE_SELECTOR,
    DATALINE_USE_VIEW_TRANSITION,
    DEFAULT_ELEMENTS_USE_VIEW_TRANSITIONS,
    DEFAULT_PATCH_SIGNALS_ONLY_IF_MISSING,
    ElementPatchMode,
    NamespaceType,
)
from datastar_sdk.models.base import CamelModel


class EventOptions(CamelModel):
    """SSE-level metadata shared by every event."""

    event_id: str | None = None
    retry_duration: int | None = None


class PatchElementsOptions(EventOptions):
    """Options for ``patch_elements``.

    ``mode`` is kept as a plain value here and checked by the generator, so
    callers get ``InvalidModeError`` rather than a validation error.
    """

    selector: str | None = None
    mode: ElementPatchMode | str | None = None
    use_view_transition: bool = DEFAULT_ELEMENTS_USE_VIEW_TRANSITIONS
    namespace: NamespaceType | None = None

    def dataline_options(self) -> dict[str, Any]:
        return {
            DATALINE_PATCH_MODE: self.mode,
            DATALINE_SELECTOR: self.selector,
            DATALINE_USE_VIEW_TRANSITION: self.use_view_transition,
            DATALINE_NAMESPACE: self.namespace,
        }


class PatchSignalsOptions(EventOptions):
    """Options for ``patch_signals`` and ``remove_signals``."""

    only_if_missing: bool = DEFAULT_PATCH_SIGNALS_ONLY_IF_MISSING

    def dataline_options(self) -> dict[str, Any]:
        return {DATALINE_ONLY_IF_MISSING: self.only_if_missing}


class ExecuteScriptOptions(EventOptions):
    """Options for ``execute_script``.

    ``attributes`` is either a mapping (rendered as ``key="value"`` pairs)
    or a list of raw attribute strings inserted verbatim.
    """

    auto_remove: bool = True
    attributes: dict[str, Any] | list[str] = Field(default_factory=dict)


class StreamOptions(CamelModel):
    """Lifecycle options for ``ServerSentEventGenerator.stream``.

    Attributes:
        on_abort: Called (and awaited if it returns an awaitable) when the
            client disconnects or the handler fails.
        on_error: Called with the handler's exception.  When absent the
            exception is re-raised after the connection is closed.
        keepalive: Keep the connection open after the handler returns, until
            ``close()`` is called or the client disconnects.
    """

    on_abort: Callable[[], Any] | None = None
    on_error: Callable[[BaseException], Any] | None = None
    keepalive: bool = False
