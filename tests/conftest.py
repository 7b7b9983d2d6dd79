"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from metasearch.config.settings import GoogleSettings, Settings


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def google_settings() -> GoogleSettings:
    """Google settings pointing at a fake endpoint."""
    return GoogleSettings(endpoint="http://search.test/ajax/services/search/web")


@pytest.fixture
def google_payload() -> dict[str, Any]:
    """Sample API document mirroring real Google AJAX Search output."""
    return {
        "responseData": {
            "results": [
                {
                    "GsearchResultClass": "GwebSearch",
                    "unescapedUrl": "https://go.dev/",
                    "url": "https://go.dev/",
                    "visibleUrl": "go.dev",
                    "cacheUrl": "http://www.google.com/search?q=cache:abc:go.dev",
                    "title": "The Go Programming Language",
                    "titleNoFormatting": "The Go Programming Language",
                    "content": "Go is an open source programming language supported by Google.",
                },
                {
                    "GsearchResultClass": "GwebSearch",
                    "unescapedUrl": "https://en.wikipedia.org/wiki/Go_(programming_language)",
                    "url": "https://en.wikipedia.org/wiki/Go_(programming_language)",
                    "visibleUrl": "en.wikipedia.org",
                    "cacheUrl": "",
                    "title": "Go (programming language) - Wikipedia",
                    "titleNoFormatting": "Go (programming language) - Wikipedia",
                    "content": "Go is a statically typed, compiled high-level programming language.",
                },
            ],
            "cursor": {"estimatedResultCount": "2"},
        },
        "responseDetails": None,
        "responseStatus": 200,
    }


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an ``httpx.AsyncClient`` backed by a request handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
