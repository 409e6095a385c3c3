"""FastAPI entry point for the Datastar SDK demo service."""

import logging

import uvicorn
from fastapi import FastAPI

from datastar_sdk import __version__
from datastar_sdk.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Datastar SDK Demo",
    description="Datastar SSE events and signal reading over ASGI",
    version=__version__,
)

# ── Register routers ────────────────────────────────────────
from api.demo import router as demo_router  # noqa: E402
from api.pages import router as pages_router  # noqa: E402
from api.raw_asgi import app as raw_asgi_app  # noqa: E402

app.include_router(pages_router)
app.include_router(demo_router)

# Same flows served by the framework-free adapter
app.mount("/asgi", raw_asgi_app)


if __name__ == "__main__":
    logger.info("Serving Datastar demo on %s:%d", settings.service_host, settings.service_port)
    uvicorn.run(
        "main:app",
        host=settings.service_host,
        port=settings.service_port,
        reload=settings.debug,
    )
