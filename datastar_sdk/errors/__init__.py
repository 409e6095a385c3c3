"""Exception hierarchy for the Datastar SDK."""

from datastar_sdk.errors.exceptions import (
    DatastarError,
    InvalidModeError,
    RequiredParameterError,
    SignalParseError,
)

__all__ = [
    "DatastarError",
    "InvalidModeError",
    "RequiredParameterError",
    "SignalParseError",
]
