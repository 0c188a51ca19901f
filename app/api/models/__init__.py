"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import FetchMoviesRequest, MovieResponse, MovieList, ErrorResponse

__all__ = [
    "FetchMoviesRequest",
    "MovieResponse",
    "MovieList",
    "ErrorResponse",
]
