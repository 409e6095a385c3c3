"""Demo HTML page that loads the Datastar client and triggers ``/merge``."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from datastar_sdk.config import get_settings

router = APIRouter(tags=["pages"])


def render_index(merge_path: str = "/merge") -> str:
    bundle = get_settings().client_bundle_url
    return (
        f'<html><head><script type="module" src="{bundle}"></script></head>'
        f'<body><div id="toMerge" data-signals:foo="\'World\'" '
        f"data-init=\"@get('{merge_path}')\">Hello</div></body></html>"
    )


@router.get("/", response_class=HTMLResponse)
async def index() -> str:
    return render_index()
