"""
Serving of the client bundle next to the JSON API.

Production serves the compiled bundle from the build directory; development
reloads ``index.html`` from the client sources on every request. Paths
starting with ``/api`` are never answered with the HTML shell.
"""

from __future__ import annotations

import logging
import secrets
from pathlib import Path
from typing import Callable

import pendulum
from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse, HTMLResponse, Response
from fastapi.staticfiles import StaticFiles

from ..domain.exceptions import BuildDirectoryNotFound

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
API_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CLIENT_ENTRY = 'src="/src/main.tsx"'


def log(message: str, source: str = "server") -> None:
    """Log a message prefixed with a 12-hour wall-clock time and its source."""
    formatted_time = pendulum.now().format("h:mm:ss A")
    logger.info("%s [%s] %s", formatted_time, source, message)


def is_api_path(path: str) -> bool:
    return ("/" + path.lstrip("/")).startswith(API_PREFIX)


def _resolve_asset(root: Path, path: str) -> Path | None:
    """Return the file under root for a request path, or None."""
    if not path:
        return None
    candidate = (root / path).resolve()
    if candidate.is_file() and candidate.is_relative_to(root):
        return candidate
    return None


def _register_shell(app: FastAPI, root: Path, shell: Callable[[], Response]) -> None:
    @app.api_route(API_PREFIX, methods=API_METHODS, include_in_schema=False)
    @app.api_route(API_PREFIX + "/{rest:path}", methods=API_METHODS, include_in_schema=False)
    async def api_not_found(rest: str = "") -> Response:
        raise HTTPException(status_code=404, detail="Not Found")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def client_shell(full_path: str) -> Response:
        if is_api_path(full_path):
            raise HTTPException(status_code=404, detail="Not Found")

        asset = _resolve_asset(root, full_path)
        if asset is not None:
            return FileResponse(asset)

        return shell()


def serve_static(app: FastAPI, dist_dir: Path) -> None:
    """
    Serve the compiled client from the build directory.

    Args:
        app: Application to register the routes on
        dist_dir: Directory holding the built ``index.html`` and assets

    Raises:
        BuildDirectoryNotFound: If the build directory does not exist
    """
    public_path = Path(dist_dir).resolve()

    if not public_path.exists():
        raise BuildDirectoryNotFound(public_path)

    assets = public_path / "assets"
    if assets.is_dir():
        app.mount("/assets", StaticFiles(directory=assets), name="assets")

    index_file = public_path / "index.html"
    _register_shell(app, public_path, lambda: FileResponse(index_file))


def setup_dev(app: FastAPI, client_dir: Path) -> None:
    """
    Serve the client sources with a freshly read ``index.html``.

    The entry script reference gets a new version token on every request so
    browsers never reuse a stale module.
    """
    client_path = Path(client_dir).resolve()
    template_path = client_path / "index.html"

    def render_index() -> Response:
        # always reload the index.html file from disk in case it changes
        template = template_path.read_text(encoding="utf-8")
        template = template.replace(
            CLIENT_ENTRY,
            f'src="/src/main.tsx?v={secrets.token_urlsafe(16)}"',
        )
        return HTMLResponse(template)

    _register_shell(app, client_path, render_index)
