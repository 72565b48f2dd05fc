"""
Main entrypoint for the User CRUD API.

This module assembles the FastAPI application: it sets up logging,
creates the user store, installs the CORS headers and the error
handlers, and includes the versioned routers.  ``create_app`` builds the
app, which is then instantiated at module import time as ``app`` so it
can be served directly::

    uvicorn user_crud_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.cors import install_cors
from .core.exceptions import UserStoreError
from .core.logging_config import setup_logging
from .services.user_service import UserStore


def create_app(store: Optional[UserStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store to serve.  When omitted a new store seeded with
        ``settings.seed_user_names`` is created.  Tests pass their own
        (possibly mocked) store here.
    settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so the store can log while
    # it is being seeded.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if store is None:
        store = UserStore(seed=settings.seed_user_names)
        logger.info("Seeded user store with %d users", len(store))
    app.state.user_store = store

    install_cors(app, settings)

    @app.exception_handler(UserStoreError)
    async def user_store_error_handler(request: Request, exc: UserStoreError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
