"""Transport adapters.

- ``datastar_sdk.adapters.asgi``: raw ASGI ``scope / receive / send``.
- ``datastar_sdk.adapters.starlette``: Starlette / FastAPI ``StreamingResponse``.

Both expose ``ServerSentEventGenerator.stream(...)`` and ``read_signals(...)``.
"""
