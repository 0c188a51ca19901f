"""
Pydantic schemas for the fetch-movies API.
"""

from pydantic import BaseModel, ConfigDict, Field


class FetchMoviesRequest(BaseModel):
    """Request body for POST /api/fetch-movies."""

    year: int | None = None
    page: int | None = Field(None, ge=1)
    genre: str | None = None


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    poster_image_url: str = Field(..., alias="posterImageUrl")
    release_year: str = Field(..., alias="releaseYear")


class MovieList(BaseModel):
    """Response model for one page of movies."""

    movies: list[MovieResponse]
    page: int
    total: int
    next: str | None = None


class ErrorResponse(BaseModel):
    """Error payload returned for 401/403/429/500."""

    error: str
    details: str | None = None
    retryAfter: int | None = None
