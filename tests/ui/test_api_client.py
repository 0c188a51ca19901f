"""
Unit tests for the Streamlit API client.
"""

import pytest
import requests

from app.ui.utils import api_client


class TestFetchMovies:
    """Tests for fetch_movies and build_fetch_payload."""

    def test_all_genre_sent_empty(self):
        assert api_client.build_fetch_payload(page=2, year=None, genre="All") == {
            "page": 2,
            "year": None,
            "genre": "",
        }

    def test_posts_to_proxy(self, monkeypatch, make_response):
        calls = []

        def fake_post(url, json=None, timeout=None):
            calls.append({"url": url, "json": json})
            return make_response(200, {"movies": [], "page": 1, "total": 0})

        monkeypatch.setenv("API_BASE_URL", "http://proxy.test/")
        monkeypatch.setattr(api_client.requests, "post", fake_post)

        data = api_client.fetch_movies(page=3, year=2021, genre="Comedy")

        assert data == {"movies": [], "page": 1, "total": 0}
        assert calls == [{
            "url": "http://proxy.test/api/fetch-movies",
            "json": {"page": 3, "year": 2021, "genre": "Comedy"},
        }]

    def test_non_2xx_raises_http_error(self, monkeypatch, make_response):
        monkeypatch.setattr(
            api_client.requests,
            "post",
            lambda url, json=None, timeout=None: make_response(429, {"error": "slow", "retryAfter": 60}),
        )
        with pytest.raises(requests.HTTPError) as exc_info:
            api_client.fetch_movies()
        assert exc_info.value.response.status_code == 429
