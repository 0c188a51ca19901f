"""
FastAPI exception handlers.

Catalog errors are converted to a structured JSON body at the API
boundary; method mismatches get an empty 405 with the Allow header.
"""

import logging

from fastapi import Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.catalog.errors import CatalogError

logger = logging.getLogger(__name__)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Convert CatalogError into its JSON error payload."""
    logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.details or exc.message)
    headers = None
    if exc.retry_after is not None:
        headers = {"Retry-After": str(exc.retry_after)}
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload(), headers=headers)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Empty 405 carrying the route's Allow header; other HTTP errors keep the default body."""
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    logger.info("Rejected %s %s", request.method, request.url.path)
    return Response(status_code=405, headers=exc.headers)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to fetch movies", "details": str(exc) or type(exc).__name__},
    )
