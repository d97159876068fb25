"""
Main entrypoint for the Model Market API.

This module assembles the FastAPI application: logging, CORS, the
MongoDB store and the resource routers.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app`` so it can be served directly::

    uvicorn model_market_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import MongoStore
from .core.logging_config import setup_logging


def create_app(settings: Settings = default_settings, store: Optional[MongoStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Settings
        Configuration to use; defaults to the environment‑derived
        module settings.
    store : Optional[MongoStore]
        Store to serve from.  When omitted one is built from
        ``settings``.  The store connects lazily on the first request
        and is closed when the application shuts down.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app_store = store or MongoStore.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            app.state.store.close()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.store = app_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
