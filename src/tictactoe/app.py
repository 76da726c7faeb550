"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI

from .config import Settings, get_settings
from .web import router


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app; each app keeps its own game sessions."""
    settings = settings or get_settings()

    app = FastAPI(title="Tic-tac-toe", debug=settings.debug)
    app.state.settings = settings
    app.state.games = {}
    app.include_router(router)
    return app


app = create_app()
