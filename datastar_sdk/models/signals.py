"""Tagged result of reading client signals from a request."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import Field

from datastar_sdk.models.base import CamelModel


class SignalsRead(CamelModel):
    """Signals were decoded into a JSON object."""

    success: Literal[True] = True
    signals: dict[str, Any] = Field(default_factory=dict)


class SignalsError(CamelModel):
    """Signals could not be read; ``error`` describes why."""

    success: Literal[False] = False
    error: str


ReadSignalsResult = Union[SignalsRead, SignalsError]
