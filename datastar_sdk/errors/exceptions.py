"""Exceptions raised by the Datastar SDK.

Emitting operations raise ``InvalidModeError`` / ``RequiredParameterError``
synchronously because bad options are programmer errors.  ``SignalParseError``
never leaves the signal reader: malformed client input is turned into a
``SignalsError`` result instead.
"""

from __future__ import annotations

from collections.abc import Sequence


class DatastarError(Exception):
    """Base class for all SDK errors."""


class InvalidModeError(DatastarError, ValueError):
    """An element patch mode outside the supported set."""

    def __init__(self, mode: object, valid_modes: Sequence[str]) -> None:
        self.mode = mode
        self.valid_modes = tuple(valid_modes)
        super().__init__(
            f'Invalid ElementPatchMode: "{mode}". '
            f"Valid modes are: {', '.join(self.valid_modes)}"
        )


class RequiredParameterError(DatastarError, ValueError):
    """A required string parameter was missing or blank."""

    def __init__(self, param_name: str, message: str | None = None) -> None:
        self.param_name = param_name
        super().__init__(message or f"{param_name} is required and cannot be empty")


class SignalParseError(DatastarError):
    """Signals could not be read from a request.

    Only used inside the signal reader; callers receive a ``SignalsError``.
    """
