"""
Connection settings for the external movie catalog.
"""

from dataclasses import dataclass

DEFAULT_MOVIE_API_HOST = "moviesdatabase.p.rapidapi.com"


@dataclass(frozen=True)
class CatalogConfig:
    """Credentials and endpoint for the external movie catalog."""

    api_key: str
    api_host: str = DEFAULT_MOVIE_API_HOST
    base_url: str = f"https://{DEFAULT_MOVIE_API_HOST}"
    page_size: int = 12
    timeout: float | None = None


def mask_secret(value: str | None, visible: int = 4) -> str:
    """Mask a secret for logging, keeping only the last few characters."""
    if not value:
        return "<unset>"
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
