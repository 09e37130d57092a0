"""
Exception handlers shared by both services.

Every error leaves the API as ``{"error": "<message>"}``:

* ``HTTPException`` (e.g. a 404 raised by a handler when the store
  reports a missing id) keeps its status code and uses its ``detail``
  as the message;
* request bodies that cannot be decoded into the expected shape are
  answered with 400 and a service specific message, before any store
  operation runs;
* anything else is logged with its traceback and answered with 500.
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException


class ErrorResponse(BaseModel):
    """Body of every error answer."""

    error: str


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_exception_handlers(app: FastAPI, invalid_body_message: str) -> None:
    """Install the JSON error handlers on ``app``.

    Parameters
    ----------
    app : FastAPI
        Application to configure.
    invalid_body_message : str
        Message returned with 400 when a request body is malformed.
    """
    logger = logging.getLogger(__name__)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Keeps headers such as ``Allow`` on a 405.
        return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, invalid_body_message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")
