"""Datastar protocol vocabulary — event names, data-line prefixes, defaults.

Everything the wire format depends on lives here so the generator and the
transport adapters agree on a single set of names.
"""

from __future__ import annotations

from enum import Enum

DATASTAR = "datastar"
DATASTAR_REQUEST = "Datastar-Request"
VERSION = "1.0.0-RC.4"

# ── Defaults ─────────────────────────────────────────────────

# SSE reconnect delay the browser assumes when no ``retry:`` line is sent.
DEFAULT_SSE_RETRY_DURATION_MS = 1000

DEFAULT_ELEMENTS_USE_VIEW_TRANSITIONS = False
DEFAULT_PATCH_SIGNALS_ONLY_IF_MISSING = False

# ── Data-line prefixes ───────────────────────────────────────

DATALINE_SELECTOR = "selector"
DATALINE_PATCH_MODE = "mode"
DATALINE_ELEMENTS = "elements"
DATALINE_NAMESPACE = "namespace"
DATALINE_USE_VIEW_TRANSITION = "useViewTransition"
DATALINE_SIGNALS = "signals"
DATALINE_ONLY_IF_MISSING = "onlyIfMissing"
DATALINE_PATHS = "paths"


class ElementPatchMode(str, Enum):
    """How an element is patched into the DOM."""

    OUTER = "outer"  # Morph entire element, preserving state
    INNER = "inner"  # Morph inner HTML only, preserving state
    REPLACE = "replace"  # Replace entire element, reset state
    PREPEND = "prepend"  # Insert at beginning inside target
    APPEND = "append"  # Insert at end inside target
    BEFORE = "before"  # Insert before target element
    AFTER = "after"  # Insert after target element
    REMOVE = "remove"  # Remove target element from DOM


class NamespaceType(str, Enum):
    """Namespace for elements that must not be created as plain HTML."""

    SVG = "svg"
    MATHML = "mathml"


class EventType(str, Enum):
    """Event types of the Datastar protocol on top of SSE."""

    PATCH_ELEMENTS = "datastar-patch-elements"
    PATCH_SIGNALS = "datastar-patch-signals"


DEFAULT_ELEMENT_PATCH_MODE = ElementPatchMode.OUTER.value

ELEMENT_PATCH_MODES: tuple[str, ...] = tuple(m.value for m in ElementPatchMode)
NAMESPACE_TYPES: tuple[str, ...] = tuple(n.value for n in NamespaceType)
EVENT_TYPES: tuple[str, ...] = tuple(e.value for e in EventType)

# An option data line is only emitted when its value differs from this.
DEFAULT_MAPPING: dict[str, object] = {
    DATALINE_PATCH_MODE: DEFAULT_ELEMENT_PATCH_MODE,
    DATALINE_USE_VIEW_TRANSITION: DEFAULT_ELEMENTS_USE_VIEW_TRANSITIONS,
    DATALINE_ONLY_IF_MISSING: DEFAULT_PATCH_SIGNALS_ONLY_IF_MISSING,
}

SSE_HEADERS: dict[str, str] = {
    "Content-Type": "text/event-stream",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}
