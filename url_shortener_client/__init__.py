"""
Client library for the URL shortener API.

Shortens long URLs, expands short URLs and fetches click analytics.
"""

from url_shortener_client.core.exceptions import (
    EmptyResponseError,
    InvalidURLError,
    MissingCredentialError,
    MissingURLError,
    ParseError,
    TransportError,
    URLShortenerClientError,
)
from url_shortener_client.services.url_service import URLShortenerClient

__version__ = "1.0.0"

__all__ = [
    "URLShortenerClient",
    "URLShortenerClientError",
    "MissingCredentialError",
    "MissingURLError",
    "InvalidURLError",
    "TransportError",
    "EmptyResponseError",
    "ParseError",
]
