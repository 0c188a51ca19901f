"""
Movie API endpoints.
"""

import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_catalog_client
from app.api.models.movie import ErrorResponse, FetchMoviesRequest, MovieList, MovieResponse
from app.core.catalog.client import MovieCatalogClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["movies"])

@router.post(
    "/fetch-movies",
    response_model=MovieList,
    response_model_exclude_none=True,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def fetch_movies(
    request_in: FetchMoviesRequest | None = None,
    client: MovieCatalogClient = Depends(get_catalog_client),
):
    """Fetch one filtered page of movies from the external catalog."""
    request_in = request_in or FetchMoviesRequest()
    page = request_in.page or 1
    logger.debug("fetch-movies year=%s page=%s genre=%r", request_in.year, page, request_in.genre)
    result = client.fetch_titles(
        year=request_in.year,
        page=page,
        genre=request_in.genre,
    )
    return MovieList(
        movies=[
            MovieResponse(
                title=m.title,
                poster_image_url=m.poster_image_url,
                release_year=m.release_year,
            )
            for m in result.movies
        ],
        page=result.page,
        total=result.total,
        next=result.next,
    )
