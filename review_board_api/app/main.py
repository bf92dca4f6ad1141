"""
Main entrypoint for the Review Board API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn review_board_api.app.main:app --port 8080

The review collection is loaded from disk when the application starts,
not at import time.  A corrupt reviews file aborts startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.storage import ReviewStorage, StorageError
from .api.router import router as api_router
from .services.review_service import ReviewService


logger = logging.getLogger(__name__)


async def invalid_payload_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed or incomplete request bodies with 400."""
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request payload"},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  Its review service
        is created when the application starts up.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        storage = ReviewStorage(settings.reviews_file)
        try:
            app.state.review_service = ReviewService(storage)
        except StorageError as e:
            logger.critical("Failed to load reviews: %s", e)
            raise
        logger.info("%s %s ready", settings.project_name, settings.api_version)
        yield
        logger.info("%s shutting down", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_exception_handler(RequestValidationError, invalid_payload_handler)
    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
