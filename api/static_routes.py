"""Bootstrap page and static asset routes."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path, PurePosixPath

from fastapi import APIRouter, HTTPException, Response

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"
CONTENT_TYPES = {
    ".css": "text/css",
    ".js": "application/javascript",
}

router = APIRouter()


def resolve_asset(asset_path: str) -> Path:
    """Return the file for ``asset_path`` inside the static directory, or 404."""
    candidate = (STATIC_DIR / asset_path).resolve()
    if STATIC_DIR not in candidate.parents or not candidate.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return candidate


@router.get("/")
def index() -> Response:
    """Serve the bootstrap page."""
    try:
        data = (STATIC_DIR / "index.html").read_bytes()
    except OSError as exc:
        logger.error("Could not read index.html: %s", exc)
        raise HTTPException(status_code=500, detail="Could not read index.html") from exc
    return Response(content=data, media_type="text/html")


@router.get("/static/{asset_path:path}")
def static_asset(asset_path: str) -> Response:
    """Serve a static asset with an explicit type for stylesheets and scripts."""
    path = resolve_asset(asset_path)
    suffix = PurePosixPath(asset_path).suffix
    media_type = CONTENT_TYPES.get(suffix) or mimetypes.guess_type(asset_path)[0]
    return Response(content=path.read_bytes(), media_type=media_type)
