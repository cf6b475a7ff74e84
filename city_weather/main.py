"""FastAPI application setup for City Weather."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api import router as api_router
from .config import settings
from .container import build_search_controller
from .controller import SearchController
from utils.logging_utils import get_tagged_logger, setup_logging

setup_logging(level=settings.log_level)
logger = get_tagged_logger(__name__, tag="main")

APP_TITLE = "City Weather"


def create_app(controller: Optional[SearchController] = None) -> FastAPI:
    """Build the app around `controller`, or one built from settings at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = controller is None
        app.state.controller = controller or build_search_controller(settings)
        logger.info("City Weather API ready")
        try:
            yield
        finally:
            if owned:
                app.state.controller.close()

    app = FastAPI(title=APP_TITLE, lifespan=lifespan)
    if controller is not None:
        app.state.controller = controller
    app.include_router(api_router, prefix="/v1")
    return app


app = create_app()
