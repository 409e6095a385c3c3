"""Signal reader — decode client signals independent of any transport.

GET requests carry signals URL-encoded in the ``datastar`` query parameter;
every other method sends them as the JSON request body.  Parse failures are
expected client input, so nothing here raises: the result is either
``SignalsRead`` or ``SignalsError``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs

from datastar_sdk.consts import DATASTAR, DATASTAR_REQUEST
from datastar_sdk.errors import SignalParseError
from datastar_sdk.models.signals import ReadSignalsResult, SignalsError, SignalsRead

logger = logging.getLogger(__name__)

_MISSING = "No datastar object in request"
_NOT_AN_OBJECT = "Datastar signals must be a JSON object"


def _decode(raw: str | bytes | None) -> dict[str, Any]:
    if raw is None:
        raise SignalParseError(_MISSING)
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SignalParseError(f"Request body is not valid UTF-8: {exc}") from exc
    if not raw.strip():
        raise SignalParseError(_MISSING)
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SignalParseError(str(exc)) from exc
    if not isinstance(value, dict):
        raise SignalParseError(_NOT_AN_OBJECT)
    return value


def parse_signals(raw: str | bytes | None) -> ReadSignalsResult:
    """Parse a JSON object of signals from text or bytes."""
    try:
        return SignalsRead(signals=_decode(raw))
    except SignalParseError as exc:
        logger.debug("Rejected datastar signals: %s", exc)
        return SignalsError(error=str(exc))


def signals_from_query(query_string: str | bytes) -> ReadSignalsResult:
    """Read signals from the ``datastar`` parameter of a raw query string."""
    if isinstance(query_string, bytes):
        query_string = query_string.decode("latin-1")
    values = parse_qs(query_string, keep_blank_values=True).get(DATASTAR)
    return parse_signals(values[0] if values else None)


def read_signals(
    method: str,
    query_string: str | bytes,
    body: str | bytes | None,
) -> ReadSignalsResult:
    """Dispatch on the HTTP method: GET reads the query, the rest the body."""
    if method.upper() == "GET":
        return signals_from_query(query_string)
    return parse_signals(body)


def is_datastar_request(headers: Mapping[str, str]) -> bool:
    """True when the request was issued by the Datastar browser client."""
    for name, value in headers.items():
        if name.lower() == DATASTAR_REQUEST.lower():
            return value.strip().lower() == "true"
    return False
