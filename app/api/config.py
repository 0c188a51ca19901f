"""
API configuration loaded from environment or defaults.
"""

import os

from app.core.catalog.config import DEFAULT_MOVIE_API_HOST, CatalogConfig
from app.core.catalog.errors import ConfigurationError


def get_movie_api_key() -> str | None:
    """Get the catalog API key from env, None when unset or blank."""
    return (os.getenv("MOVIE_API_KEY") or "").strip() or None


def get_movie_api_host() -> str:
    """Get the RapidAPI host identifier for the catalog."""
    return os.getenv("MOVIE_API_HOST", DEFAULT_MOVIE_API_HOST)


def get_movie_api_base_url() -> str:
    """Get catalog base URL from env or derive it from the host."""
    return (os.getenv("MOVIE_API_BASE_URL") or f"https://{get_movie_api_host()}").rstrip("/")


def get_movie_api_timeout() -> float | None:
    """Get outbound timeout in seconds. Unset means no explicit timeout."""
    raw = os.getenv("MOVIE_API_TIMEOUT", "").strip()
    return float(raw) if raw else None


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get optional API log file name (written under logs/)."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def load_catalog_config() -> CatalogConfig:
    """
    Build CatalogConfig from the environment.

    Raises:
        ConfigurationError: if MOVIE_API_KEY is not set
    """
    api_key = get_movie_api_key()
    if not api_key:
        raise ConfigurationError(
            "API key not configured. Set the MOVIE_API_KEY environment variable."
        )
    return CatalogConfig(
        api_key=api_key,
        api_host=get_movie_api_host(),
        base_url=get_movie_api_base_url(),
        timeout=get_movie_api_timeout(),
    )
