"""
Request Builder

Turns one operation into a fully formed httpx.Request. Building a request
performs no I/O and touches no client state, so everything about the wire
format can be tested without a network.

Wire format:
- shorten:   POST <api_url>?key=<API_KEY>, JSON body {"longUrl": url}
- expand:    GET  <api_url>?shortUrl=<url>
- analytics: GET  <api_url>?shortUrl=<url>&projection=FULL
"""

from dataclasses import dataclass
from enum import Enum

import httpx

from url_shortener_client.api.schemas import ShortenRequest

__all__ = ["Operation", "OperationKind", "prepare_request"]


class OperationKind(Enum):
    """The operations offered by the API."""
    shorten = "shorten"
    expand = "expand"
    analytics = "analytics"


@dataclass(frozen=True)
class Operation:
    """A single API call: what to do and the one URL it applies to."""
    kind: OperationKind
    url: str

    @classmethod
    def shorten(cls, long_url: str) -> "Operation":
        return cls(OperationKind.shorten, long_url)

    @classmethod
    def expand(cls, short_url: str) -> "Operation":
        return cls(OperationKind.expand, short_url)

    @classmethod
    def analytics(cls, short_url: str) -> "Operation":
        return cls(OperationKind.analytics, short_url)

    @property
    def field(self) -> str:
        """Name of the request parameter that carries the URL."""
        return "longUrl" if self.kind is OperationKind.shorten else "shortUrl"


def prepare_request(operation: Operation, api_key: str, api_url: str) -> httpx.Request:
    """
    Build the HTTP request for an operation.

    Args:
        operation: The operation to perform
        api_key: API key, sent as the key query parameter on shorten
        api_url: Base endpoint of the API

    Returns:
        httpx.Request ready to be sent
    """
    if operation.kind is OperationKind.analytics:
        return httpx.Request(
            "GET",
            api_url,
            params={"shortUrl": operation.url, "projection": "FULL"},
        )

    if operation.kind is OperationKind.expand:
        return httpx.Request("GET", api_url, params={"shortUrl": operation.url})

    return httpx.Request(
        "POST",
        api_url,
        params={"key": api_key},
        json=ShortenRequest(long_url=operation.url).model_dump(by_alias=True),
    )
