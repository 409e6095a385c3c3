"""Tests for option and result models — camelCase aliases and coercion."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from datastar_sdk.consts import NamespaceType
from datastar_sdk.models import (
    EventOptions,
    ExecuteScriptOptions,
    PatchElementsOptions,
    PatchSignalsOptions,
    StreamOptions,
)


def test_patch_elements_defaults():
    options = PatchElementsOptions()
    assert options.selector is None
    assert options.mode is None
    assert options.use_view_transition is False
    assert options.namespace is None
    assert options.event_id is None
    assert options.retry_duration is None


def test_patch_elements_camel_case_dump():
    options = PatchElementsOptions(selector="#a", use_view_transition=True, event_id="1")
    data = options.model_dump(by_alias=True, exclude_none=True)
    assert data == {"eventId": "1", "selector": "#a", "useViewTransition": True}


def test_accepts_camel_case_input():
    options = PatchSignalsOptions.model_validate({"onlyIfMissing": True, "retryDuration": 50})
    assert options.only_if_missing is True
    assert options.retry_duration == 50


def test_dataline_options_use_wire_names():
    options = PatchElementsOptions(mode="inner", namespace="svg")
    assert options.dataline_options() == {
        "mode": "inner",
        "selector": None,
        "useViewTransition": False,
        "namespace": NamespaceType.SVG,
    }


def test_unknown_namespace_rejected():
    with pytest.raises(ValidationError):
        PatchElementsOptions(namespace="html")


def test_mode_is_not_validated_by_model():
    """Mode checks belong to the generator so callers get InvalidModeError."""
    assert PatchElementsOptions(mode="sideways").mode == "sideways"


def test_execute_script_defaults():
    options = ExecuteScriptOptions()
    assert options.auto_remove is True
    assert options.attributes == {}


def test_coerce_from_none():
    assert EventOptions.coerce(None) == EventOptions()


def test_coerce_returns_same_instance_without_overrides():
    options = PatchSignalsOptions(only_if_missing=True)
    assert PatchSignalsOptions.coerce(options) is options


def test_coerce_overrides_win():
    options = PatchElementsOptions(selector="#a", mode="inner")
    merged = PatchElementsOptions.coerce(options, mode="after")
    assert merged.selector == "#a"
    assert merged.mode == "after"


def test_coerce_across_models_keeps_shared_fields():
    signals_options = PatchSignalsOptions(event_id="e", only_if_missing=True)
    event_options = EventOptions.coerce(signals_options)
    assert event_options == EventOptions(event_id="e")


def test_stream_options_callbacks():
    calls = []
    options = StreamOptions.coerce({"onAbort": lambda: calls.append("abort"), "keepalive": True})
    options.on_abort()
    assert calls == ["abort"]
    assert options.keepalive is True
    assert options.on_error is None
