"""
FastAPI client wrapper for Streamlit UI.
"""

import os
import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def build_fetch_payload(page: int = 1, year: int | None = None, genre: str = "All") -> dict:
    """Request body for /api/fetch-movies. Genre "All" is sent as empty."""
    return {
        "page": page,
        "year": year,
        "genre": "" if genre == "All" else genre,
    }


def fetch_movies(page: int = 1, year: int | None = None, genre: str = "All") -> dict:
    """Fetch one page of movies through the proxy."""
    r = requests.post(
        f"{get_api_base_url()}/api/fetch-movies",
        json=build_fetch_payload(page=page, year=year, genre=genre),
        timeout=30,
    )
    r.raise_for_status()
    return r.json()


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()
