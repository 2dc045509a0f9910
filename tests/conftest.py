"""
Pytest configuration and shared fixtures for medicine lookup tests.
"""

import pytest
import requests

from app.utils.drugscom import MedicineClient
from app.utils.drugscom.document import parse_html


def make_response(url, html="", status=200):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response._content = html.encode("utf-8")
    response.encoding = "utf-8"
    response.url = url
    return response


class FakeSession:
    """Stands in for requests.Session. Unknown URLs answer 404."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        page = self.pages.get(url)
        if isinstance(page, Exception):
            raise page
        if page is None:
            return make_response(url, "<h1>Not here</h1>", status=404)
        return make_response(url, page)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


@pytest.fixture
def fake_session():
    """Factory for FakeSession objects keyed by URL."""
    return FakeSession


@pytest.fixture
def html():
    """Parse an HTML snippet into a document root."""
    return parse_html


@pytest.fixture(scope="session")
def client():
    """Return a shared MedicineClient instance for live tests."""
    return MedicineClient()
