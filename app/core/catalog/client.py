"""
HTTP client for the MoviesDatabase titles endpoint (RapidAPI).

Builds the titles query from a filter, issues a single GET and classifies
failures into the catalog error taxonomy. No caching and no retries: a
caller receiving UpstreamRateLimited re-issues the request itself.
"""

import logging
from datetime import date
from typing import Dict, Optional

import requests

from app.core.catalog.config import CatalogConfig, mask_secret
from app.core.catalog.errors import (
    NetworkError,
    UpstreamForbidden,
    UpstreamGenericError,
    UpstreamRateLimited,
    UpstreamUnauthorized,
)
from app.core.catalog.parser import FetchResult, parse_titles_page

logger = logging.getLogger(__name__)

ALL_GENRES = "All"
TITLES_SORT = "year.decr"
TITLES_INFO = "base_info"
TITLE_TYPE_FILTER = "movie"


def build_titles_query(
    year: Optional[int] = None,
    page: int = 1,
    genre: Optional[str] = None,
    limit: int = 12,
) -> Dict[str, str]:
    """
    Build query parameters for GET /titles.

    Year defaults to the current calendar year. Genre is forwarded verbatim
    unless empty or the "All" sentinel.
    """
    params = {
        "year": str(year or date.today().year),
        "sort": TITLES_SORT,
        "limit": str(limit),
        "page": str(page or 1),
        "info": TITLES_INFO,
        "titleType": TITLE_TYPE_FILTER,
    }
    if genre and genre != ALL_GENRES:
        params["genre"] = genre
    return params


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


class MovieCatalogClient:
    """
    Thin wrapper over the external catalog API.

    Usage:
        client = MovieCatalogClient(load_catalog_config())
        result = client.fetch_titles(year=2023, page=2, genre="Comedy")
    """

    def __init__(self, config: CatalogConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    @property
    def titles_url(self) -> str:
        return f"{self.config.base_url}/titles"

    def _headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Host": self.config.api_host,
            "X-RapidAPI-Key": self.config.api_key,
        }

    def fetch_titles(
        self,
        year: Optional[int] = None,
        page: int = 1,
        genre: Optional[str] = None,
    ) -> FetchResult:
        """
        Fetch one page of movies.

        Raises:
            UpstreamRateLimited: upstream returned 429
            UpstreamForbidden: upstream returned 403
            UpstreamUnauthorized: upstream returned 401
            UpstreamGenericError: any other non-2xx, or an undecodable body
            NetworkError: transport failure
        """
        params = build_titles_query(year=year, page=page, genre=genre, limit=self.config.page_size)
        logger.info(
            f"Requesting {self.titles_url} params={params} key={mask_secret(self.config.api_key)}"
        )
        try:
            resp = self.session.get(
                self.titles_url,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Network error calling catalog API: {e}")
            raise NetworkError(str(e)) from e

        logger.info(f"API response status: {resp.status_code}")
        self._raise_for_status(resp)

        try:
            body = resp.json()
        except ValueError as e:
            raise UpstreamGenericError(resp.status_code, "invalid JSON body") from e

        result = parse_titles_page(body, requested_page=page or 1)
        logger.info(f"Received {len(result.movies)} valid movies (page {result.page}, total {result.total})")
        return result

    def _raise_for_status(self, resp: requests.Response) -> None:
        if resp.ok:
            return
        logger.warning(f"API error {resp.status_code}: {resp.text[:500]}")
        if resp.status_code == 429:
            raise UpstreamRateLimited(_parse_retry_after(resp.headers.get("retry-after")))
        if resp.status_code == 403:
            raise UpstreamForbidden()
        if resp.status_code == 401:
            raise UpstreamUnauthorized()
        raise UpstreamGenericError(resp.status_code, resp.text)
