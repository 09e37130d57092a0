"""
Request logging middleware.

Logs one line per request once the response is ready, e.g.::

    [GET] /api/v1/users - Status: 200 - Duration: 0.412ms
"""

import logging
import time

from fastapi import FastAPI, Request


def register_request_logging(app: FastAPI, logger_name: str = "doc_agent_api.requests") -> None:
    """Attach the request logging middleware to ``app``."""
    logger = logging.getLogger(logger_name)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "[%s] %s - Status: %d - Duration: %.3fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
