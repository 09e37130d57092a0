"""Unified entry point for the catalog and Pokédex APIs.

Starts both services in one process, each on its own port, under a
single asyncio loop.  Host and ports come from the ``HOST``, ``PORT``
and ``POKEDEX_PORT`` environment variables (see
``doc_agent_api.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from fastapi import FastAPI
from uvicorn import Config, Server

from doc_agent_api.core.config import settings
from doc_agent_api.app.main import create_app as create_catalog_app
from doc_agent_api.pokedex.main import create_app as create_pokedex_app


async def serve(app: FastAPI, port: int) -> None:
    """Serve ``app`` with Uvicorn on ``settings.host:port``."""
    config = Config(app=app, host=settings.host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main() -> None:
    """Run both services concurrently."""
    tasks = [
        asyncio.create_task(serve(create_catalog_app(settings), settings.port)),
        asyncio.create_task(serve(create_pokedex_app(settings), settings.pokedex_port)),
    ]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
