"""Gunicorn configuration for the Datastar demo service.

Usage:
    gunicorn main:app -c deploy/gunicorn.conf.py

SSE responses hold a connection open for as long as a handler (or a
``keepalive`` stream) runs, so timeouts are sized for long-lived streams
rather than request/response latency.
"""

import multiprocessing
import os

from datastar_sdk.config import get_settings

settings = get_settings()

# ─── Server socket ──────────────────────────────────────────────

bind = os.getenv("BIND", f"{settings.service_host}:{settings.service_port}")
backlog = 2048

# ─── Worker processes ───────────────────────────────────────────
#
# One async worker per core; each event loop serves many open streams.

workers = int(os.getenv("WORKERS", min(multiprocessing.cpu_count(), 4)))
worker_class = "uvicorn.workers.UvicornWorker"

# ─── Timeouts ───────────────────────────────────────────────────

timeout = 300           # Longest expected open stream
graceful_timeout = 30   # In-flight streams get this long to finish on reload
keepalive = 120

# ─── Logging ────────────────────────────────────────────────────

accesslog = "-"
errorlog = "-"
loglevel = settings.log_level.lower()

proc_name = "datastar-demo"


def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info(
        "Starting Datastar demo: workers=%d, timeout=%ds, bind=%s",
        workers,
        timeout,
        bind,
    )


def worker_exit(server, worker):
    server.log.info("Worker exit (pid: %s)", worker.pid)
