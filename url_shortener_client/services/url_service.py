"""
URL Shortener Client

The client handles the three calls offered by the URL shortener API:
- shorten: long URL -> short URL
- expand: short URL -> long URL
- analytics: short URL -> click statistics, as a report or an XML document

Design Decisions:
- One synchronous request per call; nothing is retried or cached
- The HTTP client is injectable, which is how tests replace the network
- Input is validated before any request is built
- State is fixed at construction; no call mutates the client
"""

import logging
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from url_shortener_client.api.request_builder import Operation, OperationKind, prepare_request
from url_shortener_client.api.schemas import AnalyticsReport, ExpandResponse, ShortenResponse
from url_shortener_client.core.exceptions import (
    EmptyResponseError,
    MissingCredentialError,
    MissingURLError,
    ParseError,
    TransportError,
)
from url_shortener_client.core.setting import Settings, settings
from url_shortener_client.core.validators import ParamValidator
from url_shortener_client.middleware.logging import add_logging_hooks
from url_shortener_client.services.analytics_service import render_analytics_xml

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class URLShortenerClient:
    """
    Client for the URL shortener API.

    Usage:
        with URLShortenerClient("API_KEY") as client:
            short_url = client.shorten("http://www.example.com/page")
            long_url = client.expand(short_url)
            print(client.get_analytics(short_url))
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
        validator: Optional[ParamValidator] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key for the shortener service (required)
            api_url: Base endpoint (default: SHORTENER_API_URL setting)
            timeout: Request timeout in seconds when the client creates its
                own HTTP client (default: REQUEST_TIMEOUT setting)
            http_client: httpx client used to send requests; closing it
                stays the caller's responsibility
            validator: Parameter validator (default: validator over FIELDS)

        Raises:
            MissingCredentialError: If api_key is missing or empty
        """
        if not api_key:
            raise MissingCredentialError()

        self.api_key = api_key
        self.api_url = api_url or settings.SHORTENER_API_URL
        self.validator = validator or ParamValidator()

        if http_client is None:
            http_client = add_logging_hooks(
                httpx.Client(timeout=timeout or settings.REQUEST_TIMEOUT)
            )
            self._owns_http_client = True
        else:
            self._owns_http_client = False
        self._http_client = http_client

    @classmethod
    def from_settings(cls, config: Settings = settings, **kwargs) -> "URLShortenerClient":
        """Build a client from configuration."""
        return cls(
            config.SHORTENER_API_KEY,
            api_url=config.SHORTENER_API_URL,
            timeout=config.REQUEST_TIMEOUT,
            **kwargs,
        )

    def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "URLShortenerClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def shorten(self, long_url: str) -> str:
        """
        Shorten a long URL.

        Args:
            long_url: The URL to shorten

        Returns:
            The short URL issued by the service

        Raises:
            MissingURLError: If long_url is None
            InvalidURLError: If long_url is malformed
            TransportError: If the request fails or returns a non-2xx status
            EmptyResponseError: If the response has no body
            ParseError: If the response is not the expected JSON
        """
        operation = self._operation(OperationKind.shorten, long_url)
        return self._execute(operation, ShortenResponse).id

    def expand(self, short_url: str) -> str:
        """
        Expand a short URL back to the original long URL.

        Raises the same errors as shorten().
        """
        operation = self._operation(OperationKind.expand, short_url)
        return self._execute(operation, ExpandResponse).long_url

    def get_analytics_report(self, short_url: str) -> AnalyticsReport:
        """
        Fetch the full analytics for a short URL.

        Raises the same errors as shorten().
        """
        operation = self._operation(OperationKind.analytics, short_url)
        return self._execute(operation, AnalyticsReport)

    def get_analytics(self, short_url: str) -> str:
        """
        Fetch the analytics for a short URL rendered as an XML document.

        Raises the same errors as shorten().
        """
        return render_analytics_xml(self.get_analytics_report(short_url))

    def _operation(self, kind: OperationKind, url: Optional[str]) -> Operation:
        if url is None:
            raise MissingURLError()
        operation = Operation(kind, url)
        self.validator.validate({operation.field: True}, {operation.field: url})
        return operation

    def _execute(self, operation: Operation, model: Type[ResponseModel]) -> ResponseModel:
        """
        Send the request for an operation and parse its response.

        Args:
            operation: A validated operation
            model: Pydantic model describing the expected response body

        Returns:
            The parsed response
        """
        request = prepare_request(operation, self.api_key, self.api_url)

        try:
            response = self._http_client.send(request)
        except httpx.HTTPError as e:
            logger.warning(f"{operation.kind.value} request for {operation.url} failed: {e}")
            raise TransportError(operation.url, str(e) or type(e).__name__, original_error=e) from e

        if not response.is_success:
            raise TransportError(
                operation.url,
                f"{response.status_code} {response.reason_phrase}",
            )

        if not response.content:
            raise EmptyResponseError(operation.url)

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise ParseError(str(e), original_error=e) from e
