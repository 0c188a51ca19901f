"""
FastAPI application entry point for the movie browser proxy.

Run: uvicorn app.api.main:app --host 0.0.0.0 --port 8000
"""

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.config import get_api_host, get_api_port, get_log_file, get_log_level
from app.api.exceptions import catalog_error_handler, generic_exception_handler, method_not_allowed_handler
from app.api.routers import movies, system
from app.core.catalog.errors import CatalogError
from app.utils.logging_config import configure_api_logging

configure_api_logging(level=get_log_level(), log_file=get_log_file())

app = FastAPI(
    title="Movie Browser API",
    description="Proxy to the MoviesDatabase catalog with filtering and validation",
    version="1.0.0",
)

app.add_exception_handler(CatalogError, catalog_error_handler)
app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Browser API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
