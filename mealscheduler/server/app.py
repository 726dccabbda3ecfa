"""
FastAPI application factory.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import AppConfig
from ..domain.exceptions import InvalidTimeFormat
from ..selection import SelectionState
from .harness import log, serve_static, setup_dev
from .routes import router

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None,
    selection: Optional[SelectionState] = None,
) -> FastAPI:
    """
    Build the web application.

    Args:
        config: Application configuration; defaults are used when omitted
        selection: Shared selection state; seeded from the configured
            congregations when omitted

    Raises:
        BuildDirectoryNotFound: In production mode, if the client was not built
    """
    config = config or AppConfig()

    app = FastAPI(title="mealscheduler", version=__version__)
    app.state.config = config
    app.state.selection = selection or SelectionState(config.user_congregations())

    @app.exception_handler(InvalidTimeFormat)
    async def invalid_time_handler(request: Request, exc: InvalidTimeFormat) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    app.include_router(router)

    if config.server.is_production:
        serve_static(app, config.server.dist_dir)
    else:
        setup_dev(app, config.server.client_dir)

    log(f"client served in {config.server.mode} mode")
    return app
