"""
FastAPI dependencies shared by the catalog endpoints.

The catalog and the health service are attached to ``app.state`` by the
application factory; these helpers hand them to endpoint functions so
that no endpoint module imports a process‑wide instance.
"""

from fastapi import Request

from doc_agent_api.app.services.catalog_store import CatalogStore
from doc_agent_api.app.services.health_service import HealthService


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


def get_health_service(request: Request) -> HealthService:
    return request.app.state.health
