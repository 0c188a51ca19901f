"""
Shared fixtures: a recording stand-in for requests.Session and builders
for upstream MoviesDatabase responses.
"""

import json

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from app.core.catalog.config import CatalogConfig


class FakeSession:
    """Records GET calls and replays queued responses or exceptions."""

    def __init__(self):
        self.calls = []
        self.queue = []

    def push(self, outcome):
        self.queue.append(outcome)

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        outcome = self.queue.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        pass


def _make_response(status_code=200, body=None, headers=None, text=None):
    resp = requests.Response()
    resp.status_code = status_code
    if text is not None:
        resp._content = text.encode("utf-8")
    else:
        resp._content = json.dumps(body if body is not None else {}).encode("utf-8")
    resp.encoding = "utf-8"
    resp.headers = CaseInsensitiveDict(headers or {})
    return resp


def _raw_movie(title="Dune", year=2024, poster="https://img.test/dune.jpg", title_type="Movie"):
    record = {"id": f"tt-{title}"}
    if title is not None:
        record["titleText"] = {"text": title}
    if year is not None:
        record["releaseYear"] = {"year": year}
    if poster is not None:
        record["primaryImage"] = {"url": poster}
    if title_type is not None:
        record["titleType"] = {"text": title_type, "id": title_type.lower()}
    return record


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def raw_movie():
    return _raw_movie


@pytest.fixture
def catalog_config():
    return CatalogConfig(api_key="test-key-1234", base_url="https://catalog.test")
