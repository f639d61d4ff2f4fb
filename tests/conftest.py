"""
Shared fixtures for the URL shortener client tests.

No test touches the network: unit tests send requests through
httpx.MockTransport, integration tests through a FastAPI app that fakes
the upstream API.
"""

import copy
import json
from typing import Callable, Dict

import httpx
import pytest
from fastapi import FastAPI, HTTPException, Query
from fastapi.testclient import TestClient
from pydantic import BaseModel

from url_shortener_client.core.setting import DEFAULT_API_URL
from url_shortener_client.services.url_service import URLShortenerClient

API_KEY = "TEST_KEY"
API_PATH = httpx.URL(DEFAULT_API_URL).path

ANALYTICS_PAYLOAD = {
    "kind": "urlshortener#url",
    "id": "http://goo.gl/fbsS",
    "longUrl": "http://www.google.com/",
    "status": "OK",
    "analytics": {
        "allTime": {
            "shortUrlClicks": "3227",
            "longUrlClicks": "9358",
            "referrers": [{"count": "2160", "id": "Unknown/empty"}],
            "countries": [
                {"count": "1022", "id": "US"},
                {"count": "155", "id": "DE"},
            ],
            "browsers": [{"count": "1025", "id": "Chrome"}],
            "platforms": [{"count": "1030", "id": "Windows"}],
        },
        "day": {
            "shortUrlClicks": "2",
            "longUrlClicks": "15",
            "browsers": [
                {"count": "9", "id": "Chrome"},
                {"count": "4", "id": "Firefox"},
            ],
            "countries": [{"count": "2", "id": "GB"}],
        },
    },
}


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], URLShortenerClient]:
    """Build a client whose requests are answered by handler."""
    def _make(handler):
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return URLShortenerClient(API_KEY, http_client=http_client)
    return _make


@pytest.fixture
def json_response() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Handler that records each request and answers with a fixed JSON body."""
    def _make(payload, status_code: int = 200, seen=None):
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return httpx.Response(status_code, content=json.dumps(payload).encode())
        return handler
    return _make


class _ShortenBody(BaseModel):
    longUrl: str


def create_fake_api() -> FastAPI:
    """
    Fake of the upstream URL shortener API.

    Keeps issued short URLs in memory and reports fixed analytics for them.
    """
    app = FastAPI()
    issued: Dict[str, str] = {}

    @app.post(API_PATH)
    def shorten(body: _ShortenBody, key: str = Query(None)):
        if key != API_KEY:
            raise HTTPException(status_code=400, detail="Bad key")
        short_url = f"http://goo.gl/t{len(issued) + 1}"
        issued[short_url] = body.longUrl
        return {"kind": "urlshortener#url", "id": short_url, "longUrl": body.longUrl}

    @app.get(API_PATH)
    def expand(shortUrl: str, projection: str = Query(None)):
        if shortUrl not in issued:
            raise HTTPException(status_code=404, detail="Not Found")
        result = {
            "kind": "urlshortener#url",
            "id": shortUrl,
            "longUrl": issued[shortUrl],
            "status": "OK",
        }
        if projection == "FULL":
            result["analytics"] = ANALYTICS_PAYLOAD["analytics"]
        return result

    return app


@pytest.fixture
def api_key() -> str:
    """API key the fake upstream API accepts."""
    return API_KEY


@pytest.fixture
def analytics_payload() -> dict:
    """Analytics response as the API sends it, safe to modify per test."""
    return copy.deepcopy(ANALYTICS_PAYLOAD)


@pytest.fixture
def fake_api() -> FastAPI:
    """A fresh fake of the upstream API."""
    return create_fake_api()


@pytest.fixture
def fake_api_client(fake_api):
    """URL shortener client wired to the fake upstream API."""
    with TestClient(fake_api) as http_client:
        yield URLShortenerClient(API_KEY, http_client=http_client)
