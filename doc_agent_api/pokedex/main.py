"""
Main entrypoint for the Pokédex API::

    uvicorn doc_agent_api.pokedex.main:app --port 8081
"""

import logging
from typing import Optional

from fastapi import FastAPI

from doc_agent_api.core.config import Settings, settings as default_settings
from doc_agent_api.core.errors import register_exception_handlers
from doc_agent_api.core.logging_config import setup_logging
from doc_agent_api.core.middleware import register_request_logging
from doc_agent_api.pokedex.handlers import router
from doc_agent_api.pokedex.store import PokedexStore


INVALID_BODY_MESSAGE = "Invalid request payload"


def create_app(settings: Optional[Settings] = None, store: Optional[PokedexStore] = None) -> FastAPI:
    """Create the Pokédex application around ``store`` (a fresh, empty one by default)."""
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.pokedex_name, version=settings.api_version, debug=settings.debug)
    app.state.pokedex = store if store is not None else PokedexStore()

    register_exception_handlers(app, INVALID_BODY_MESSAGE)
    register_request_logging(app, logger_name="doc_agent_api.pokedex.requests")
    app.include_router(router)

    logging.getLogger(__name__).info("%s ready", settings.pokedex_name)
    return app


app = create_app()
