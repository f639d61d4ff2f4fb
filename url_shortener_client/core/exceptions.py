"""
Custom Exceptions

This module defines the exceptions raised by the URL shortener client.

Every error is fatal to the current call: it is raised to the caller
immediately and nothing is retried. Exceptions carry the offending values
as attributes so callers can report them without parsing messages.
"""

from typing import Optional


class URLShortenerClientError(Exception):
    """Base exception for the URL shortener client."""
    pass


class MissingCredentialError(URLShortenerClientError):
    """Raised when the client is constructed without an API key."""

    def __init__(self):
        super().__init__("API key is missing")


class MissingURLError(URLShortenerClientError):
    """Raised when an operation is called without a URL."""

    def __init__(self):
        super().__init__("Missing URL")


class ParameterError(URLShortenerClientError):
    """Raised when request parameters fail schema validation."""
    pass


class InvalidURLError(ParameterError):
    """Raised when URL validation fails."""

    def __init__(self, url, reason: str = "Invalid URL supplied"):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason} [{url}]")


class UnknownFieldError(ParameterError):
    """Raised when a field outside the parameter registry is referenced."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Received invalid param: {field}")


class MissingRequiredFieldError(ParameterError):
    """Raised when a required field is absent from the supplied values."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing mandatory param: {field}")


class NullRequiredFieldError(ParameterError):
    """Raised when a required field is present but set to None."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Received undefined mandatory param: {field}")


class InvalidFieldTypeError(ParameterError):
    """Raised when a field value is not of the registered type."""

    def __init__(self, field: str, expected: type):
        self.field = field
        self.expected = expected
        super().__init__(f"Invalid data type for param {field}, expected {expected.__name__}")


class TransportError(URLShortenerClientError):
    """Raised when the HTTP call fails or returns a non-2xx status."""

    def __init__(self, url: str, status_line: str, original_error: Optional[Exception] = None):
        self.url = url
        self.status_line = status_line
        self.original_error = original_error
        super().__init__(f"Couldn't process {url} [{status_line}]")


class EmptyResponseError(URLShortenerClientError):
    """Raised when a successful response carries no body."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"No data found for {url}")


class ParseError(URLShortenerClientError):
    """Raised when a response body is not the JSON document we expect."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Failed to parse response: {message}")
