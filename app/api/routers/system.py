"""
System API endpoints (health).
"""

from fastapi import APIRouter

from app.api.config import get_movie_api_host, get_movie_api_key

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check():
    """Health check: reports whether the catalog credential is configured."""
    configured = get_movie_api_key() is not None
    return {
        "status": "healthy" if configured else "degraded",
        "api_key_configured": configured,
        "api_host": get_movie_api_host(),
    }
