"""
Main entrypoint for the catalog API.

This module assembles the FastAPI application: logging, error handlers,
request logging and the versioned routers.  The catalog store is built
here and attached to ``app.state`` so each application instance owns
its own data.  ``app`` is created at import time, which makes it easy
to run with uvicorn::

    uvicorn doc_agent_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from doc_agent_api.core.config import Settings, settings as default_settings
from doc_agent_api.core.errors import register_exception_handlers
from doc_agent_api.core.logging_config import setup_logging
from doc_agent_api.core.middleware import register_request_logging
from doc_agent_api.app.api.v1.router import router as v1_router
from doc_agent_api.app.services.catalog_store import CatalogStore
from doc_agent_api.app.services.health_service import HealthService


INVALID_BODY_MESSAGE = "invalid request body"


def create_app(settings: Optional[Settings] = None, store: Optional[CatalogStore] = None) -> FastAPI:
    """Create and configure the catalog application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    store : Optional[CatalogStore]
        Catalog to serve.  When omitted a new one is built, seeded with
        the sample records if ``settings.seed_sample_data`` is set.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        if settings.seed_sample_data:
            store = CatalogStore.with_sample_data(settings.id_policy)
        else:
            store = CatalogStore(settings.id_policy)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.catalog = store
    app.state.health = HealthService(settings.api_version)

    register_exception_handlers(app, INVALID_BODY_MESSAGE)
    register_request_logging(app)
    app.include_router(v1_router, prefix="/api/v1")

    logging.getLogger(__name__).info(
        "%s ready: %d users, %d products, %s ids",
        settings.project_name,
        len(store.users),
        len(store.products),
        settings.id_policy,
    )
    return app


app = create_app()
