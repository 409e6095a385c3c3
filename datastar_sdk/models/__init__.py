from datastar_sdk.models.base import CamelModel
from datastar_sdk.models.options import (
    EventOptions,
    ExecuteScriptOptions,
    PatchElementsOptions,
    PatchSignalsOptions,
    StreamOptions,
)
from datastar_sdk.models.signals import ReadSignalsResult, SignalsError, SignalsRead

__all__ = [
    "CamelModel",
    "EventOptions",
    "ExecuteScriptOptions",
    "PatchElementsOptions",
    "PatchSignalsOptions",
    "ReadSignalsResult",
    "SignalsError",
    "SignalsRead",
    "StreamOptions",
]
