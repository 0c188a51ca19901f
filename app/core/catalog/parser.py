"""
Validating parse step for MoviesDatabase title records.

Upstream records are loosely typed nested dicts. Each one is either turned
into a well-formed MovieSummary or rejected; nothing is defaulted here.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

MOVIE_TITLE_TYPE = "movie"


@dataclass(frozen=True)
class MovieSummary:
    """Display-ready movie record. All fields are non-empty."""

    title: str
    poster_image_url: str
    release_year: str


@dataclass
class FetchResult:
    """One page of validated movies plus upstream pagination info."""

    movies: List[MovieSummary] = field(default_factory=list)
    page: int = 1
    total: int = 0
    next: Optional[str] = None


def _dig(record: Any, *keys: str) -> Any:
    value = record
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return str(value).strip()


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def parse_movie(raw: Any) -> Optional[MovieSummary]:
    """
    Validate one upstream record.

    Args:
        raw: Upstream title record (RawApiMovie)

    Returns:
        MovieSummary, or None when title, release year or poster URL is
        missing, or when the record carries a title type other than movie.
    """
    title = _text(_dig(raw, "titleText", "text"))
    release_year = _text(_dig(raw, "releaseYear", "year"))
    poster = _text(_dig(raw, "primaryImage", "url"))
    if not (title and release_year and poster):
        return None

    title_type = _dig(raw, "titleType")
    if title_type is not None:
        if isinstance(title_type, dict):
            title_type = title_type.get("text") or title_type.get("id")
        type_text = _text(title_type)
        if type_text.lower() != MOVIE_TITLE_TYPE:
            return None

    return MovieSummary(title=title, poster_image_url=poster, release_year=release_year)


def parse_titles_page(body: Any, requested_page: int) -> FetchResult:
    """
    Build a FetchResult from a decoded /titles response body.

    Missing `results` is an empty page, not an error.
    """
    if not isinstance(body, dict):
        body = {}
    results = body.get("results") or []

    movies = []
    for raw in results:
        movie = parse_movie(raw)
        if movie is not None:
            movies.append(movie)

    dropped = len(results) - len(movies)
    if dropped:
        logger.debug(f"Dropped {dropped} of {len(results)} records failing validation")

    next_cursor = body.get("next")
    return FetchResult(
        movies=movies,
        page=_as_int(body.get("page"), requested_page) or requested_page,
        total=_as_int(body.get("entries"), 0),
        next=str(next_cursor) if next_cursor else None,
    )
