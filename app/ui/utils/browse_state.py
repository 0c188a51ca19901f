"""
Filter, pagination and result state for the browse page.

Kept free of Streamlit calls so the page logic can be exercised directly;
the Streamlit page stores one BrowseState in st.session_state.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

ALL_GENRES = "All"
GENRE_OPTIONS = [ALL_GENRES, "Animation", "Comedy", "Fantasy"]
YEAR_OPTION_COUNT = 6

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_YEAR = "Unknown"
PLACEHOLDER_POSTER_URL = os.getenv(
    "POSTER_PLACEHOLDER_URL", "https://placehold.co/300x430?text=No+Poster"
)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please wait a moment before trying again."
FORBIDDEN_MESSAGE = "API access forbidden. Please check your API key and subscription."
UNAUTHORIZED_MESSAGE = "Unauthorized. Please check your API key."
NETWORK_MESSAGE = "Network error. Please check your internet connection and try again."

FetchFn = Callable[..., Dict[str, Any]]


def year_options(today: Optional[date] = None) -> List[int]:
    """Selectable years, newest first."""
    current = (today or date.today()).year
    return [current - offset for offset in range(YEAR_OPTION_COUNT)]


def error_message(status_code: int, payload: Optional[Dict[str, Any]] = None) -> str:
    """Map a failed proxy response to the advisory shown to the user."""
    if status_code == 429:
        return RATE_LIMIT_MESSAGE
    if status_code == 403:
        return FORBIDDEN_MESSAGE
    if status_code == 401:
        return UNAUTHORIZED_MESSAGE
    detail = (payload or {}).get("error") or "Something went wrong"
    return f"Error: {detail}"


def card_fields(movie: Dict[str, Any]) -> Dict[str, str]:
    """Display values for one movie, with fallbacks for empty fields."""
    year = movie.get("releaseYear")
    return {
        "title": movie.get("title") or UNKNOWN_TITLE,
        "poster_image": movie.get("posterImageUrl") or PLACEHOLDER_POSTER_URL,
        "release_year": str(year) if year else UNKNOWN_YEAR,
    }


def _response_payload(response: Optional[requests.Response]) -> Dict[str, Any]:
    if response is None:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


@dataclass
class BrowseState:
    """
    Browse page state.

    Every fetch gets a monotonically increasing token; a response is applied
    only if its token is still the latest, so a slow stale response can never
    overwrite a newer one.
    """

    page: int = 1
    year: Optional[int] = None
    genre: str = ALL_GENRES
    movies: List[Dict[str, Any]] = field(default_factory=list)
    loading: bool = False
    message: Optional[str] = None
    _token: int = 0
    _fetched_filter: Optional[Tuple[int, Optional[int], str]] = None

    def filter_key(self) -> Tuple[int, Optional[int], str]:
        return (self.page, self.year, self.genre)

    def previous_page(self) -> None:
        self.page = max(1, self.page - 1)

    def next_page(self) -> None:
        self.page += 1

    def set_year(self, year: Optional[int]) -> None:
        self.year = int(year) if year else None

    def set_genre(self, genre: str) -> None:
        self.genre = genre or ALL_GENRES

    def heading(self) -> str:
        return f"{self.year or date.today().year} {self.genre} Movie List"

    def needs_fetch(self) -> bool:
        """True when page, year or genre changed since the last fetch."""
        return self._fetched_filter != self.filter_key()

    def begin_fetch(self) -> int:
        self._token += 1
        self._fetched_filter = self.filter_key()
        self.loading = True
        return self._token

    def is_current(self, token: int) -> bool:
        return token == self._token

    def apply_success(self, token: int, data: Dict[str, Any]) -> bool:
        if not self.is_current(token):
            logger.debug(f"Discarding stale response for request {token}")
            return False
        self.movies = list(data.get("movies") or [])
        self.message = None
        self.loading = False
        logger.info(f"Movies received: {len(self.movies)}")
        return True

    def apply_failure(self, token: int, message: str) -> bool:
        if not self.is_current(token):
            logger.debug(f"Discarding stale error for request {token}")
            return False
        self.movies = []
        self.message = message
        self.loading = False
        return True

    def refresh(self, fetch: FetchFn) -> bool:
        """
        Run one fetch for the current filter and apply its outcome.

        Args:
            fetch: Callable(page=, year=, genre=) returning the proxy JSON;
                raises requests.HTTPError on non-2xx

        Returns:
            True if the outcome was applied, False if it was superseded
        """
        token = self.begin_fetch()
        try:
            data = fetch(page=self.page, year=self.year, genre=self.genre)
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else 0
            payload = _response_payload(e.response)
            logger.error(f"API error {status}: {payload}")
            return self.apply_failure(token, error_message(status, payload))
        except requests.RequestException as e:
            logger.error(f"Network error fetching movies: {e}")
            return self.apply_failure(token, NETWORK_MESSAGE)
        return self.apply_success(token, data)

    def cards(self) -> List[Dict[str, str]]:
        return [card_fields(movie) for movie in self.movies]
