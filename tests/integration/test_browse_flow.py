"""
End-to-end browse flow: BrowseState -> proxy API -> fake upstream catalog.

The Streamlit page is bypassed; the state object is driven exactly as the
page drives it, with requests routed through the FastAPI TestClient.
"""

import pytest
import requests
from fastapi.testclient import TestClient

from app.api.dependencies import get_catalog_config, get_http_session
from app.api.main import app
from app.ui.utils.api_client import build_fetch_payload
from app.ui.utils.browse_state import RATE_LIMIT_MESSAGE, BrowseState


@pytest.fixture
def proxy_fetch(fake_session, catalog_config):
    """Fetch function with the same contract as api_client.fetch_movies."""
    app.dependency_overrides[get_catalog_config] = lambda: catalog_config
    app.dependency_overrides[get_http_session] = lambda: fake_session
    client = TestClient(app)

    def fetch(page=1, year=None, genre="All"):
        r = client.post("/api/fetch-movies", json=build_fetch_payload(page=page, year=year, genre=genre))
        if r.status_code >= 400:
            resp = requests.Response()
            resp.status_code = r.status_code
            resp._content = r.content
            raise requests.HTTPError(response=resp)
        return r.json()

    yield fetch
    app.dependency_overrides.clear()


class TestBrowseFlow:
    """Complete user journey through the proxy."""

    def test_renders_only_valid_movies(self, proxy_fetch, fake_session, make_response, raw_movie):
        """Two valid movies and one without a poster render exactly two cards."""
        fake_session.push(make_response(200, {
            "page": 1,
            "entries": 3,
            "results": [
                raw_movie("Dune", 2024, "https://img.test/dune.jpg"),
                raw_movie("Ghost", 2024, poster=None),
                raw_movie("Wicked", 2024, "https://img.test/wicked.jpg"),
            ],
        }))
        state = BrowseState()

        assert state.needs_fetch()
        state.refresh(proxy_fetch)

        cards = state.cards()
        assert len(cards) == 2
        assert [c["title"] for c in cards] == ["Dune", "Wicked"]
        assert "genre" not in fake_session.calls[0]["params"]
        assert fake_session.calls[0]["params"]["page"] == "1"

    def test_paging_and_genre_reach_upstream(self, proxy_fetch, fake_session, make_response, raw_movie):
        state = BrowseState()
        fake_session.push(make_response(200, {"results": [raw_movie()]}))
        state.refresh(proxy_fetch)

        state.set_genre("Comedy")
        state.next_page()
        fake_session.push(make_response(200, {"page": 2, "results": []}))
        assert state.needs_fetch()
        state.refresh(proxy_fetch)

        params = fake_session.calls[1]["params"]
        assert params["genre"] == "Comedy"
        assert params["page"] == "2"
        assert state.movies == []
        assert state.message is None

    def test_rate_limit_shows_advisory(self, proxy_fetch, fake_session, make_response):
        fake_session.push(make_response(429, text="quota"))
        state = BrowseState()

        state.refresh(proxy_fetch)

        assert state.movies == []
        assert state.message == RATE_LIMIT_MESSAGE
        assert state.loading is False
