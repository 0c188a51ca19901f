"""
External movie catalog access: query building, HTTP client and the
validating parse step for upstream title records.
"""

from app.core.catalog.client import MovieCatalogClient, build_titles_query
from app.core.catalog.parser import FetchResult, MovieSummary, parse_movie, parse_titles_page

__all__ = [
    "MovieCatalogClient",
    "build_titles_query",
    "FetchResult",
    "MovieSummary",
    "parse_movie",
    "parse_titles_page",
]
